from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.group_repository import GroupRepository
from src.adapter.repositories.latency import SimulatedLatency
from src.adapter.repositories.membership_repository import MembershipRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(
        self, session: AsyncSession, latency: Optional[SimulatedLatency] = None
    ):
        self.session = session
        self.latency = latency or SimulatedLatency()

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session, self.latency)
        self.groups = GroupRepository(self.session, self.latency)
        self.memberships = MembershipRepository(self.session, self.latency)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
