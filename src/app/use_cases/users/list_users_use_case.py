"""
List Users Use Case

Returns every user that can act in the sandbox.
"""

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ListUsersResponse, UserInfo


class ListUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ListUsersResponse]:
        async with self.uow:
            users = await self.uow.users.list_all()
            return Return.ok(ListUsersResponse(users=[UserInfo.from_entity(u) for u in users]))
