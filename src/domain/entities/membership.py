"""
Membership Entity

Links a User to a Group with a request status.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from .enums import MembershipStatus

if TYPE_CHECKING:
    from .user import User
    from .group import Group


class Membership(SQLModel, table=True):
    """
    Membership entity - links User to Group.

    Business Rules:
    - (user_id, group_id) must be unique; this index is the only guard
      against two concurrent join requests for the same pair
    - Created as pending by a join request
    - pending moves to active or rejected through an admin resolution
    - active and rejected are terminal
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    group_id: UUID = Field(foreign_key="riding_groups.id", nullable=False, index=True)

    status: MembershipStatus = Field(default=MembershipStatus.pending)

    joined_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Relationships
    user: "User" = Relationship(back_populates="memberships")
    group: "Group" = Relationship(back_populates="memberships")

    __table_args__ = (
        Index("idx_membership_user_group", "user_id", "group_id", unique=True),
        Index("idx_membership_status", "status"),
    )
