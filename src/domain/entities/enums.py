"""
Domain Enums

All enumeration types used across domain entities and rules.
"""

from enum import Enum


class UserRole(str, Enum):
    """Authorization role of a user"""

    rider = "RIDER"
    admin = "ADMIN"


class UserStatus(str, Enum):
    """User account status"""

    active = "ACTIVE"
    suspended = "SUSPENDED"


class GroupJoinPolicy(str, Enum):
    """How a group admits new members"""

    open = "OPEN"
    invite_only = "INVITE_ONLY"


class MembershipStatus(str, Enum):
    """
    Persisted membership status.

    "No membership" is not a status: it is the absence of a record and is
    passed around as None.
    """

    pending = "PENDING"
    active = "ACTIVE"
    rejected = "REJECTED"


class MembershipAction(str, Enum):
    """Administrator decision on a pending membership"""

    approve = "APPROVE"
    reject = "REJECT"


class DenialCode(str, Enum):
    """Machine-readable reason a rule denied a request"""

    user_suspended = "USER_SUSPENDED"
    group_inactive = "GROUP_INACTIVE"
    already_member = "ALREADY_MEMBER"
    already_pending = "ALREADY_PENDING"
    previously_rejected = "PREVIOUSLY_REJECTED"
    not_admin = "NOT_ADMIN"
    not_pending = "NOT_PENDING"
