"""
List Pending Memberships Use Case

Returns the membership requests waiting for an administrator.
"""

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.groups.dtos import MembershipInfo

from .dtos import ListPendingMembershipsResponse


class ListPendingMembershipsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ListPendingMembershipsResponse]:
        async with self.uow:
            pending = await self.uow.memberships.list_pending()
            return Return.ok(
                ListPendingMembershipsResponse(
                    memberships=[MembershipInfo.from_entity(m) for m in pending]
                )
            )
