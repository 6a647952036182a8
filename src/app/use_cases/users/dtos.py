"""
User Use Case DTOs (Data Transfer Objects)
"""

from typing import List

from pydantic import BaseModel

from src.domain.entities import User


class UserInfo(BaseModel):
    """User facts as exposed to clients"""

    id: str
    name: str
    email: str
    role: str
    status: str

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role.value,
            status=user.status.value,
        )


class ListUsersResponse(BaseModel):
    """Response for list users use case"""

    users: List[UserInfo]
