"""Authentication status endpoint."""

from fastapi import APIRouter

from minik.api.dependencies import BoardClientDep
from minik.api.models import APIResponse, AuthStatusResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/status", response_model=APIResponse[AuthStatusResponse])
def auth_status(client: BoardClientDep) -> APIResponse[AuthStatusResponse]:
    """Check the GitHub token by asking who it belongs to."""
    user = client.current_user()
    return APIResponse(data=AuthStatusResponse(authenticated=True, user=user))
