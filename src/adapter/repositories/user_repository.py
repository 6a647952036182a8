from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.latency import SimulatedLatency
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(
        self, session: AsyncSession, latency: Optional[SimulatedLatency] = None
    ):
        self.session = session
        self.latency = latency or SimulatedLatency()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        await self.latency.read()
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[User]:
        """Get all users"""
        stmt = select(User).order_by(User.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, user: User) -> User:
        """Create a new user"""
        await self.latency.write()
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
