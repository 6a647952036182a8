"""
Group Use Cases

Listing groups and requesting to join one.
"""

from .dtos import GroupInfo, JoinGroupResponse, ListGroupsResponse, MembershipInfo
from .join_group_use_case import JoinGroupUseCase
from .list_groups_use_case import ListGroupsUseCase

__all__ = [
    "JoinGroupUseCase",
    "ListGroupsUseCase",
    "GroupInfo",
    "JoinGroupResponse",
    "ListGroupsResponse",
    "MembershipInfo",
]
