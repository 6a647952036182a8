from fastapi import APIRouter, Depends, status

from src.api.error import ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import ListUsersResponse, ListUsersUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/users", tags=["User"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ListUsersResponse)
async def list_users(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    List Users

    Returns every user with role and status, so a client can pick who acts.
    """
    use_case = ListUsersUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value
