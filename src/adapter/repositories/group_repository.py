from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.latency import SimulatedLatency
from src.app.repositories.group_repository import IGroupRepository
from src.domain.entities import Group


class GroupRepository(IGroupRepository):
    """Group repository implementation using SQLModel"""

    def __init__(
        self, session: AsyncSession, latency: Optional[SimulatedLatency] = None
    ):
        self.session = session
        self.latency = latency or SimulatedLatency()

    async def get_by_id(self, group_id: UUID) -> Optional[Group]:
        """Get group by ID"""
        await self.latency.read()
        stmt = select(Group).where(Group.id == group_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Group]:
        """Get all groups"""
        stmt = select(Group).order_by(Group.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, group: Group) -> Group:
        """Create a new group"""
        await self.latency.write()
        self.session.add(group)
        await self.session.flush()
        await self.session.refresh(group)
        return group
