"""
Group Entity

Represents a riding group users can ask to join.
"""

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Field, Index, Relationship, SQLModel

from .enums import GroupJoinPolicy

if TYPE_CHECKING:
    from .membership import Membership


class Group(SQLModel, table=True):
    """
    Group entity - the target of a membership.

    Business Rules:
    - Inactive groups accept no join requests
    - Invite-only groups currently accept join requests like open ones
    """

    __tablename__ = "riding_groups"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: str = Field(default="", max_length=1024)

    is_active: bool = Field(default=True)
    policy: GroupJoinPolicy = Field(default=GroupJoinPolicy.open)

    image_url: str = Field(default="", max_length=2048)

    # Relationships
    memberships: list["Membership"] = Relationship(back_populates="group")

    __table_args__ = (Index("idx_group_is_active", "is_active"),)
