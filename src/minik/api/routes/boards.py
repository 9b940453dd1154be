"""Board endpoints: fetch, move items, column visibility."""

from fastapi import APIRouter

from minik.api.dependencies import BoardClientDep, PreferenceStoreDep
from minik.api.models import (
    APIResponse,
    BoardDataResponse,
    BoardResponse,
    ColumnVisibilityResponse,
    HiddenColumnsResponse,
    MoveItemRequest,
    MoveItemResponse,
)

router = APIRouter(prefix="/boards", tags=["boards"])


@router.get("", response_model=APIResponse[dict[str, list[BoardResponse]]])
def list_all_boards(client: BoardClientDep) -> APIResponse[dict[str, list[BoardResponse]]]:
    """Boards of every organization, grouped by login.

    Organizations without boards (or whose listing failed) are omitted.
    """
    grouped = client.list_all_boards()
    return APIResponse(
        data={
            login: [BoardResponse.model_validate(b) for b in boards]
            for login, boards in grouped.items()
            if boards
        }
    )


@router.get("/{board_id}", response_model=APIResponse[BoardDataResponse])
def get_board(
    board_id: str, client: BoardClientDep, store: PreferenceStoreDep
) -> APIResponse[BoardDataResponse]:
    """Fetch a board with the user's hidden columns attached."""
    data = client.fetch_board(board_id)
    data = data.with_hidden_columns(store.hidden_columns(board_id))
    store.remember_status_field(board_id, data.status_field_id)
    return APIResponse(data=BoardDataResponse.model_validate(data))


@router.post(
    "/{board_id}/items/{item_id}/move",
    response_model=APIResponse[MoveItemResponse],
)
def move_item(
    board_id: str,
    item_id: str,
    request: MoveItemRequest,
    client: BoardClientDep,
    store: PreferenceStoreDep,
) -> APIResponse[MoveItemResponse]:
    """Move an item to another column.

    The status field ID falls back to the one seen on the last fetch of
    this board; with neither the move is refused.
    """
    status_field_id = request.status_field_id or store.status_field(board_id)
    client.move_item(board_id, item_id, status_field_id, request.column_id)
    return APIResponse(data=MoveItemResponse(item_id=item_id, column_id=request.column_id))


@router.get("/{board_id}/columns/hidden", response_model=APIResponse[HiddenColumnsResponse])
def hidden_columns(board_id: str, store: PreferenceStoreDep) -> APIResponse[HiddenColumnsResponse]:
    """Columns hidden on a board."""
    return APIResponse(
        data=HiddenColumnsResponse(board_id=board_id, hidden_columns=store.hidden_columns(board_id))
    )


@router.post(
    "/{board_id}/columns/{column_id}/hide",
    response_model=APIResponse[HiddenColumnsResponse],
)
def hide_column(
    board_id: str, column_id: str, store: PreferenceStoreDep
) -> APIResponse[HiddenColumnsResponse]:
    """Hide a column."""
    hidden = store.hide_column(board_id, column_id)
    return APIResponse(data=HiddenColumnsResponse(board_id=board_id, hidden_columns=hidden))


@router.post(
    "/{board_id}/columns/{column_id}/show",
    response_model=APIResponse[HiddenColumnsResponse],
)
def show_column(
    board_id: str, column_id: str, store: PreferenceStoreDep
) -> APIResponse[HiddenColumnsResponse]:
    """Show a hidden column."""
    hidden = store.show_column(board_id, column_id)
    return APIResponse(data=HiddenColumnsResponse(board_id=board_id, hidden_columns=hidden))


@router.post(
    "/{board_id}/columns/{column_id}/toggle",
    response_model=APIResponse[ColumnVisibilityResponse],
)
def toggle_column(
    board_id: str, column_id: str, store: PreferenceStoreDep
) -> APIResponse[ColumnVisibilityResponse]:
    """Flip a column's visibility."""
    visible = store.toggle_column(board_id, column_id)
    return APIResponse(
        data=ColumnVisibilityResponse(board_id=board_id, column_id=column_id, visible=visible)
    )
