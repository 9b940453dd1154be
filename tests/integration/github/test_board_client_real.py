"""Integration tests for BoardClient against the real GitHub API.

These tests require:
- GITHUB_TOKEN environment variable (scopes: read:org, project)
- MINIK_TEST_BOARD_ID environment variable (a ProjectV2 node ID the token can read)

Nothing is written: moves are not exercised here.

Run with: pytest tests/integration/github/ -m real
"""

import os

import pytest

from minik.github import BoardClient, BoardNotFoundError, GraphQLError, Transport

# Skip all tests in this module if credentials not available
pytestmark = [
    pytest.mark.integration,
    pytest.mark.real,
    pytest.mark.skipif(
        not os.environ.get("GITHUB_TOKEN") or not os.environ.get("MINIK_TEST_BOARD_ID"),
        reason="GITHUB_TOKEN and MINIK_TEST_BOARD_ID required",
    ),
]


@pytest.fixture
def board_id() -> str:
    """Get test board ID from environment."""
    return os.environ["MINIK_TEST_BOARD_ID"]


@pytest.fixture
def client():
    """Create a BoardClient with the environment token."""
    client = BoardClient(Transport(os.environ["GITHUB_TOKEN"]))
    yield client
    client.close()


class TestRealBoardClient:
    """Read-only checks against a live board."""

    def test_current_user(self, client: BoardClient) -> None:
        assert client.current_user()

    def test_list_all_boards_keys_match_organizations(self, client: BoardClient) -> None:
        orgs = client.list_organizations()

        result = client.list_all_boards()

        assert list(result) == [org.login for org in orgs]

    def test_fetch_board(self, client: BoardClient, board_id: str) -> None:
        data = client.fetch_board(board_id)

        assert data.board.id == board_id
        assert data.hidden_columns == []
        for column in data.columns:
            assert column.items_count == len(data.items_in(column.id))
        if data.columns:
            assert data.status_field_id

    def test_unknown_board(self, client: BoardClient) -> None:
        # GitHub answers an unknown global ID with an error rather than a null node
        with pytest.raises((BoardNotFoundError, GraphQLError)):
            client.fetch_board("PVT_doesNotExist")
