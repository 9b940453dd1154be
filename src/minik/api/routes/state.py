"""Application state endpoints."""

from fastapi import APIRouter, status

from minik.api.dependencies import PreferenceStoreDep
from minik.api.models import (
    APIResponse,
    HiddenColumnsResponse,
    SelectBoardRequest,
    StateResponse,
    ToggleResponse,
    WindowPositionRequest,
)

router = APIRouter(prefix="/state", tags=["state"])


@router.get("", response_model=APIResponse[StateResponse])
def get_state(store: PreferenceStoreDep) -> APIResponse[StateResponse]:
    """Current application state."""
    return APIResponse(data=StateResponse.model_validate(store.get_state()))


@router.put("/selected-board", response_model=APIResponse[HiddenColumnsResponse])
def select_board(
    request: SelectBoardRequest, store: PreferenceStoreDep
) -> APIResponse[HiddenColumnsResponse]:
    """Select a board; returns its saved hidden columns."""
    hidden = store.select_board(request.board_id)
    return APIResponse(data=HiddenColumnsResponse(board_id=request.board_id, hidden_columns=hidden))


@router.post("/my-items/toggle", response_model=APIResponse[ToggleResponse])
def toggle_my_items(store: PreferenceStoreDep) -> APIResponse[ToggleResponse]:
    """Flip the "only my items" filter."""
    return APIResponse(data=ToggleResponse(value=store.toggle_my_items()))


@router.post("/expanded/toggle", response_model=APIResponse[ToggleResponse])
def toggle_expanded(store: PreferenceStoreDep) -> APIResponse[ToggleResponse]:
    """Flip the expanded window flag."""
    return APIResponse(data=ToggleResponse(value=store.toggle_expanded()))


@router.put("/window", status_code=status.HTTP_204_NO_CONTENT)
def save_window_position(request: WindowPositionRequest, store: PreferenceStoreDep) -> None:
    """Remember the window position."""
    store.save_window_position(request.x, request.y)
