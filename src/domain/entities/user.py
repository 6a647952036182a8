"""
User Entity

Represents a rider or administrator who can request group memberships.
"""

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

from .enums import UserRole, UserStatus

if TYPE_CHECKING:
    from .membership import Membership


class User(SQLModel, table=True):
    """
    User entity - identity plus authorization attributes.

    Business Rules:
    - Email must be unique across all users
    - Suspended users are denied every action
    - Only admins can resolve membership requests
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)

    role: UserRole = Field(default=UserRole.rider)
    status: UserStatus = Field(default=UserStatus.active)

    # Relationships
    memberships: list["Membership"] = Relationship(back_populates="user")
