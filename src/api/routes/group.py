from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.groups import (
    JoinGroupResponse,
    JoinGroupUseCase,
    ListGroupsResponse,
    ListGroupsUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/groups", tags=["Group"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ListGroupsResponse)
async def list_groups(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    List Groups

    Returns every group with its activity flag and join policy.
    """
    use_case = ListGroupsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class JoinGroupRequest(BaseModel):
    """
    Join group HTTP request payload

    The acting user is named explicitly; there is no authentication.
    """

    user_id: UUID = Field(..., description="User requesting to join")


@router.post(
    "/{group_id}/join",
    status_code=status.HTTP_201_CREATED,
    response_model=JoinGroupResponse,
)
async def join_group(
    group_id: UUID,
    request: JoinGroupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Join Group

    Asks the domain whether the user may join and, if allowed, records a
    pending membership.

    Raises:
        - 403 Forbidden: USER_SUSPENDED
        - 404 Not Found: ENTITY_NOT_FOUND
        - 409 Conflict: GROUP_INACTIVE, ALREADY_MEMBER, ALREADY_PENDING,
                        PREVIOUSLY_REJECTED or ALREADY_REQUESTED
        - 422 Unprocessable Entity: malformed IDs
        - 500 Internal Server Error: Server error
    """
    use_case = JoinGroupUseCase(uow)
    result = await use_case.execute(request.user_id, group_id)

    if result.is_err():
        error = result.error
        if error.code == "ENTITY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "USER_SUSPENDED":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code in (
            "GROUP_INACTIVE",
            "ALREADY_MEMBER",
            "ALREADY_PENDING",
            "PREVIOUSLY_REJECTED",
            "ALREADY_REQUESTED",
        ):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
