"""Data models for GitHub Projects v2 boards."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class Organization:
    """A GitHub organization the authenticated user belongs to."""

    id: int
    login: str
    name: str | None = None


@dataclass(frozen=True)
class Board:
    """A GitHub Projects v2 project."""

    id: str  # GraphQL node ID
    title: str
    number: int  # organization-scoped, human-facing only
    url: str


@dataclass(frozen=True)
class Column:
    """One option of the board's status field, used as a kanban lane."""

    id: str  # option ID, not the field ID
    name: str
    items_count: int = 0


@dataclass(frozen=True)
class Item:
    """An issue or pull request placed on a board."""

    id: str
    title: str
    url: str | None = None
    assignees: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    column_id: str = ""  # empty when unclassified


@dataclass(frozen=True)
class BoardData:
    """Snapshot of one board fetch.

    Attributes:
        board: Board metadata.
        columns: Status options in the order GitHub returned them.
        items: Items whose content is still accessible.
        status_field_id: Field ID needed to move items. Empty when the
            board has no matching status field.
        hidden_columns: Column IDs hidden by the user. Never filled in by
            the client; see with_hidden_columns().
    """

    board: Board
    columns: list[Column] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)
    status_field_id: str = ""
    hidden_columns: list[str] = field(default_factory=list)

    def with_hidden_columns(self, hidden_columns: list[str]) -> BoardData:
        """Return a copy carrying the caller's hidden column IDs."""
        return replace(self, hidden_columns=list(hidden_columns))

    def visible_columns(self) -> list[Column]:
        """Columns not listed in hidden_columns, in board order."""
        hidden = set(self.hidden_columns)
        return [column for column in self.columns if column.id not in hidden]

    def items_in(self, column_id: str) -> list[Item]:
        """Items currently placed in the given column."""
        return [item for item in self.items if item.column_id == column_id]

    def items_assigned_to(self, login: str) -> list[Item]:
        """Items with the given user among their assignees."""
        return [item for item in self.items if login in item.assignees]

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible representation."""
        return asdict(self)
