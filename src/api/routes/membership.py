from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.memberships import (
    ListPendingMembershipsResponse,
    ListPendingMembershipsUseCase,
    ResolveMembershipResponse,
    ResolveMembershipUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import MembershipAction

router = APIRouter(prefix="/memberships", tags=["Membership"])


@router.get(
    "/pending",
    status_code=status.HTTP_200_OK,
    response_model=ListPendingMembershipsResponse,
)
async def list_pending_memberships(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    List Pending Memberships

    Returns every membership request awaiting an administrator.
    """
    use_case = ListPendingMembershipsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ResolveMembershipRequest(BaseModel):
    """
    Resolve membership HTTP request payload

    Only APPROVE and REJECT are accepted; anything else fails validation.
    """

    admin_id: UUID = Field(..., description="User resolving the request")
    action: MembershipAction = Field(..., description="APPROVE or REJECT")


@router.post(
    "/{membership_id}/resolve",
    status_code=status.HTTP_200_OK,
    response_model=ResolveMembershipResponse,
)
async def resolve_membership(
    membership_id: UUID,
    request: ResolveMembershipRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Resolve Membership

    Approves or rejects a pending membership on behalf of an administrator.

    Raises:
        - 403 Forbidden: USER_SUSPENDED or NOT_ADMIN
        - 404 Not Found: ENTITY_NOT_FOUND
        - 409 Conflict: NOT_PENDING
        - 422 Unprocessable Entity: unknown action or malformed IDs
        - 500 Internal Server Error: Server error
    """
    use_case = ResolveMembershipUseCase(uow)
    result = await use_case.execute(request.admin_id, membership_id, request.action)

    if result.is_err():
        error = result.error
        if error.code == "ENTITY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in ("USER_SUSPENDED", "NOT_ADMIN"):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "NOT_PENDING":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
