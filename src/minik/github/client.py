"""BoardClient - the single entry point for reading and updating boards."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import replace
from types import TracebackType
from typing import TYPE_CHECKING

from minik.config import DEFAULT_STATUS_FIELD
from minik.github.exceptions import BoardNotFoundError, GitHubError, ParseError
from minik.github.items import extract_items
from minik.github.models import Board, BoardData, Column, Item, Organization
from minik.github.mutation import MutationClient
from minik.github.schema import extract_columns
from minik.github.tolerant import Node
from minik.github.transport import Transport
from minik.logging import get_logger

if TYPE_CHECKING:
    from minik.config import Settings

logger = get_logger("github.client")

VIEWER_QUERY = """
query {
    viewer {
        login
    }
}
"""

ORG_BOARDS_QUERY = """
query($org: String!, $first: Int!) {
    organization(login: $org) {
        projectsV2(first: $first) {
            nodes {
                id
                title
                number
                url
            }
        }
    }
}
"""

BOARD_QUERY = """
query($projectId: ID!, $first: Int!) {
    node(id: $projectId) {
        ... on ProjectV2 {
            id
            title
            number
            url
            views(first: 1) {
                nodes {
                    fields(first: 20) {
                        nodes {
                            ... on ProjectV2SingleSelectField {
                                id
                                name
                                options {
                                    id
                                    name
                                }
                            }
                        }
                    }
                }
            }
            items(first: $first) {
                nodes {
                    id
                    content {
                        ... on Issue {
                            title
                            url
                            assignees(first: 10) {
                                nodes {
                                    login
                                }
                            }
                            labels(first: 10) {
                                nodes {
                                    name
                                }
                            }
                        }
                        ... on PullRequest {
                            title
                            url
                            assignees(first: 10) {
                                nodes {
                                    login
                                }
                            }
                            labels(first: 10) {
                                nodes {
                                    name
                                }
                            }
                        }
                    }
                    fieldValues(first: 20) {
                        nodes {
                            ... on ProjectV2ItemFieldSingleSelectValue {
                                field {
                                    ... on ProjectV2SingleSelectField {
                                        id
                                    }
                                }
                                optionId
                            }
                        }
                    }
                }
            }
        }
    }
}
"""


class BoardClient:
    """Read boards from GitHub Projects v2 and move their items.

    Every call is one logical unit of work producing a fresh result; the
    client keeps no state between calls beyond its HTTP connection pool.
    """

    def __init__(
        self,
        transport: Transport,
        status_field_name: str = DEFAULT_STATUS_FIELD,
        page_size: int = 100,
        max_workers: int = 4,
    ) -> None:
        """Initialize BoardClient.

        Args:
            transport: Authenticated transport
            status_field_name: Name of the single-select field used as columns
            page_size: Boards/items fetched per query (first page only)
            max_workers: Threads used by list_all_boards
        """
        self.transport = transport
        self.status_field_name = status_field_name
        self.page_size = page_size
        self.max_workers = max_workers
        self.mutations = MutationClient(transport)

    @classmethod
    def from_settings(cls, settings: Settings, token: str) -> BoardClient:
        """Build a client (and its transport) from settings."""
        transport = Transport(
            token,
            api_url=settings.api_url,
            graphql_url=settings.graphql_url,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
        )
        return cls(
            transport,
            status_field_name=settings.status_field_name,
            page_size=settings.page_size,
            max_workers=settings.max_workers,
        )

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __enter__(self) -> BoardClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def current_user(self) -> str:
        """Login of the authenticated user.

        Raises:
            ParseError: If the response carries no login
        """
        data = self.transport.graphql(VIEWER_QUERY)
        login = Node(data).get("viewer", "login").as_str()
        if not login:
            raise ParseError("Failed to parse viewer login")
        logger.info("Current GitHub user: %s", login)
        return login

    def list_organizations(self) -> list[Organization]:
        """List organizations the authenticated user belongs to.

        Raises:
            ParseError: If the response is not an array
        """
        logger.debug("Fetching organizations from GitHub API")
        payload = self.transport.rest_get("/user/orgs")
        if not isinstance(payload, list):
            raise ParseError("Failed to parse organizations response: expected an array")

        orgs = []
        for entry in payload:
            node = Node(entry)
            login = node["login"].as_str()
            if not login:
                logger.debug("Skipping organization without login: %s", entry)
                continue
            orgs.append(
                Organization(
                    id=node["id"].as_int(),
                    login=login,
                    name=node["name"].as_optional_str(),
                )
            )

        logger.info("Successfully fetched %d organizations", len(orgs))
        for org in orgs:
            logger.debug("  - %s (%s)", org.login, org.name or "no name")
        return orgs

    def list_boards_for_organization(self, login: str) -> list[Board]:
        """List the first page of boards owned by an organization.

        Entries missing id, title, number or url are dropped.

        Raises:
            ParseError: If the boards list is not an array
        """
        logger.debug("Fetching boards for organization: %s", login)
        data = self.transport.graphql(ORG_BOARDS_QUERY, {"org": login, "first": self.page_size})

        nodes = Node(data).get("organization", "projectsV2", "nodes")
        if not nodes.is_list():
            raise ParseError(f"Failed to parse projects array for organization {login}")

        boards = []
        for node in nodes.as_list():
            board = _board_or_none(node)
            if board is None:
                logger.debug("Skipping incomplete board entry: %s", node.value)
                continue
            boards.append(board)

        logger.info("Successfully fetched %d boards for org %s", len(boards), login)
        for board in boards:
            logger.debug("  - %s (#%d) - %s", board.title, board.number, board.url)
        return boards

    def list_all_boards(self) -> dict[str, list[Board]]:
        """List boards for every organization concurrently.

        A failing organization contributes an empty list instead of failing
        the whole result. A failure listing the organizations themselves
        still propagates.

        Returns:
            Mapping of organization login to its boards, in organization order
        """
        orgs = self.list_organizations()
        results: dict[str, list[Board]] = {org.login: [] for org in orgs}
        if not orgs:
            return results

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(orgs))) as executor:
            future_to_login = {
                executor.submit(self.list_boards_for_organization, org.login): org.login
                for org in orgs
            }
            for future in as_completed(future_to_login):
                login = future_to_login[future]
                try:
                    results[login] = future.result()
                except GitHubError as e:
                    logger.warning("Failed to list boards for %s: %s", login, e)
                except Exception as e:
                    logger.error("Unexpected failure listing boards for %s: %s", login, e)

        total = sum(len(boards) for boards in results.values())
        logger.info("Fetched %d boards across %d organizations", total, len(orgs))
        return results

    def fetch_board(self, board_id: str) -> BoardData:
        """Fetch board metadata, columns and items in one round trip.

        Args:
            board_id: ProjectV2 node ID

        Returns:
            A fresh BoardData. hidden_columns is always empty; callers
            inject it with BoardData.with_hidden_columns().

        Raises:
            BoardNotFoundError: If the node is null
        """
        logger.info("Fetching board data for ID: %s", board_id)
        data = self.transport.graphql(BOARD_QUERY, {"projectId": board_id, "first": self.page_size})

        node = Node(data)["node"]
        if node.is_null:
            logger.error("Board not found for ID: %s", board_id)
            raise BoardNotFoundError(f"Board not found: {board_id}")

        board = Board(
            id=node["id"].as_str(),
            title=node["title"].as_str(),
            number=node["number"].as_int(),
            url=node["url"].as_str(),
        )
        logger.debug("Board: %s (#%d) - %s", board.title, board.number, board.url)

        columns, status_field_id = extract_columns(node, self.status_field_name)
        items, counts = extract_items(node)
        columns, items = _merge_counts(columns, items, counts)

        for column in columns:
            logger.debug("Column '%s': %d items", column.name, column.items_count)
        logger.info(
            "Fetched board '%s': %d columns, %d items", board.title, len(columns), len(items)
        )

        return BoardData(
            board=board,
            columns=columns,
            items=items,
            status_field_id=status_field_id,
        )

    def move_item(
        self, board_id: str, item_id: str, status_field_id: str, target_column_id: str
    ) -> None:
        """Move an item to another column. See MutationClient.move_item."""
        self.mutations.move_item(board_id, item_id, status_field_id, target_column_id)


def _board_or_none(node: Node) -> Board | None:
    board_id = node["id"].as_optional_str()
    title = node["title"].as_optional_str()
    url = node["url"].as_optional_str()
    number = node["number"].as_int(-1)
    if board_id is None or title is None or url is None or number < 0:
        return None
    return Board(id=board_id, title=title, number=number, url=url)


def _merge_counts(
    columns: list[Column], items: list[Item], counts: dict[str, int]
) -> tuple[list[Column], list[Item]]:
    """Attach item counts to columns.

    Items pointing at an option that is not a column (another single-select
    field) become unclassified, and their counts are dropped.
    """
    known = {column.id for column in columns}
    merged_items = [
        item if not item.column_id or item.column_id in known else replace(item, column_id="")
        for item in items
    ]
    merged_columns = [replace(column, items_count=counts.get(column.id, 0)) for column in columns]
    return merged_columns, merged_items
