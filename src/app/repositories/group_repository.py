from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Group


class IGroupRepository(ABC):
    """Group repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, group_id: UUID) -> Optional[Group]:
        """Get group by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Group]:
        """Get all groups"""
        pass

    @abstractmethod
    async def create(self, group: Group) -> Group:
        """Create a new group"""
        pass
