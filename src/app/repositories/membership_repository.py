from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Membership, MembershipStatus


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        pass

    @abstractmethod
    async def get_by_user_and_group(
        self, user_id: UUID, group_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and group"""
        pass

    @abstractmethod
    async def list_pending(self) -> List[Membership]:
        """Get all memberships awaiting resolution"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update_status(
        self, membership: Membership, status: MembershipStatus
    ) -> Membership:
        """Persist a new status for an existing membership"""
        pass


class DuplicateMembershipError(Exception):
    """A membership for the same (user_id, group_id) was written concurrently"""
