"""
Membership Use Cases

Reviewing and resolving membership requests.
"""

from .dtos import ListPendingMembershipsResponse, ResolveMembershipResponse
from .list_pending_memberships_use_case import ListPendingMembershipsUseCase
from .resolve_membership_use_case import ResolveMembershipUseCase

__all__ = [
    "ListPendingMembershipsUseCase",
    "ResolveMembershipUseCase",
    "ListPendingMembershipsResponse",
    "ResolveMembershipResponse",
]
