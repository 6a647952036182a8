"""
Membership Use Case DTOs (Data Transfer Objects)
"""

from typing import List

from pydantic import BaseModel

from src.app.services.trace import TraceEntry
from src.app.use_cases.groups.dtos import MembershipInfo


class ListPendingMembershipsResponse(BaseModel):
    """Response for list pending memberships use case"""

    memberships: List[MembershipInfo]


class ResolveMembershipResponse(BaseModel):
    """Response for resolve membership use case"""

    membership: MembershipInfo
    previous_status: str
    trace: List[TraceEntry]
