"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    DenialCode,
    GroupJoinPolicy,
    MembershipAction,
    MembershipStatus,
    UserRole,
    UserStatus,
)

# Export all entities
from .user import User
from .group import Group
from .membership import Membership

__all__ = [
    # Enums
    "DenialCode",
    "GroupJoinPolicy",
    "MembershipAction",
    "MembershipStatus",
    "UserRole",
    "UserStatus",
    # Entities
    "User",
    "Group",
    "Membership",
]
