from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.latency import SimulatedLatency
from src.app.repositories.membership_repository import (
    DuplicateMembershipError,
    IMembershipRepository,
)
from src.domain.entities import Membership, MembershipStatus


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(
        self, session: AsyncSession, latency: Optional[SimulatedLatency] = None
    ):
        self.session = session
        self.latency = latency or SimulatedLatency()

    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        await self.latency.read()
        stmt = select(Membership).where(Membership.id == membership_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_and_group(
        self, user_id: UUID, group_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and group"""
        await self.latency.read()
        stmt = select(Membership).where(
            Membership.user_id == user_id, Membership.group_id == group_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_pending(self) -> List[Membership]:
        """Get all memberships awaiting resolution"""
        await self.latency.read()
        stmt = select(Membership).where(Membership.status == MembershipStatus.pending)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        await self.latency.write()
        self.session.add(membership)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateMembershipError(
                f"Membership already exists for user {membership.user_id} "
                f"in group {membership.group_id}"
            ) from exc
        await self.session.refresh(membership)
        return membership

    async def update_status(
        self, membership: Membership, status: MembershipStatus
    ) -> Membership:
        """Persist a new status for an existing membership"""
        await self.latency.write()
        membership.status = status
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership
