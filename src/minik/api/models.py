"""Pydantic models for the REST API."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# GitHub models


class AuthStatusResponse(BaseModel):
    """Whether the server holds a working GitHub token."""

    authenticated: bool
    user: str | None = None


class OrganizationResponse(BaseModel):
    """Response model for an organization."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    login: str
    name: str | None


class BoardResponse(BaseModel):
    """Response model for a board's metadata."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    number: int
    url: str


class ColumnResponse(BaseModel):
    """Response model for a board column."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    items_count: int


class ItemResponse(BaseModel):
    """Response model for a board item."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    url: str | None
    assignees: list[str]
    labels: list[str]
    column_id: str


class BoardDataResponse(BaseModel):
    """Response model for a full board fetch."""

    model_config = ConfigDict(from_attributes=True)

    board: BoardResponse
    columns: list[ColumnResponse]
    items: list[ItemResponse]
    status_field_id: str
    hidden_columns: list[str]


class MoveItemRequest(BaseModel):
    """Request model for moving an item to another column."""

    column_id: str = Field(..., min_length=1)
    status_field_id: str | None = Field(
        default=None,
        description="Status field ID; defaults to the one seen on the last board fetch",
    )


class MoveItemResponse(BaseModel):
    """Response model for a confirmed move."""

    item_id: str
    column_id: str


# Preference models


class StateResponse(BaseModel):
    """Response model for application state."""

    model_config = ConfigDict(from_attributes=True)

    selected_board_id: str | None
    show_only_my_items: bool
    is_expanded: bool
    window_x: int
    window_y: int


class SelectBoardRequest(BaseModel):
    """Request model for selecting a board."""

    board_id: str = Field(..., min_length=1)


class WindowPositionRequest(BaseModel):
    """Request model for saving the window position."""

    x: int
    y: int


class HiddenColumnsResponse(BaseModel):
    """Hidden columns of one board."""

    board_id: str
    hidden_columns: list[str]


class ColumnVisibilityResponse(BaseModel):
    """Visibility of one column after a toggle."""

    board_id: str
    column_id: str
    visible: bool


class ToggleResponse(BaseModel):
    """New value of a boolean preference."""

    value: bool

