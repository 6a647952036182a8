"""
List Groups Use Case

Returns every group with its join-relevant facts.
"""

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import GroupInfo, ListGroupsResponse


class ListGroupsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ListGroupsResponse]:
        async with self.uow:
            groups = await self.uow.groups.list_all()
            return Return.ok(
                ListGroupsResponse(groups=[GroupInfo.from_entity(g) for g in groups])
            )
