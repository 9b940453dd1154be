"""Organization endpoints."""

from fastapi import APIRouter

from minik.api.dependencies import BoardClientDep
from minik.api.models import APIResponse, BoardResponse, OrganizationResponse

router = APIRouter(prefix="/organizations", tags=["organizations"])


@router.get("", response_model=APIResponse[list[OrganizationResponse]])
def list_organizations(client: BoardClientDep) -> APIResponse[list[OrganizationResponse]]:
    """List organizations the authenticated user belongs to."""
    orgs = client.list_organizations()
    return APIResponse(data=[OrganizationResponse.model_validate(o) for o in orgs])


@router.get("/{login}/boards", response_model=APIResponse[list[BoardResponse]])
def list_organization_boards(
    login: str, client: BoardClientDep
) -> APIResponse[list[BoardResponse]]:
    """List boards owned by one organization."""
    boards = client.list_boards_for_organization(login)
    return APIResponse(data=[BoardResponse.model_validate(b) for b in boards])
