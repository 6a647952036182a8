"""
Group Use Case DTOs (Data Transfer Objects)

All Response classes for the group domain.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.services.trace import TraceEntry
from src.domain.decision import Decision
from src.domain.entities import Group, Membership


# ============================================================================
# Response DTOs
# ============================================================================


class GroupInfo(BaseModel):
    """Group facts as exposed to clients"""

    id: str
    name: str
    description: str
    is_active: bool
    policy: str
    image_url: str

    @classmethod
    def from_entity(cls, group: Group) -> "GroupInfo":
        return cls(
            id=str(group.id),
            name=group.name,
            description=group.description,
            is_active=group.is_active,
            policy=group.policy.value,
            image_url=group.image_url,
        )


class MembershipInfo(BaseModel):
    """Membership facts as exposed to clients"""

    id: str
    user_id: str
    group_id: str
    status: str
    joined_at: Optional[str] = None

    @classmethod
    def from_entity(cls, membership: Membership) -> "MembershipInfo":
        return cls(
            id=str(membership.id),
            user_id=str(membership.user_id),
            group_id=str(membership.group_id),
            status=membership.status.value,
            joined_at=membership.joined_at.isoformat() if membership.joined_at else None,
        )


class ListGroupsResponse(BaseModel):
    """Response for list groups use case"""

    groups: List[GroupInfo]


class JoinGroupResponse(BaseModel):
    """Response for join group use case"""

    decision: Decision
    membership: MembershipInfo
    trace: List[TraceEntry]
