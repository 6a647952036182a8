"""
Use Cases

Organized by domain folder:
- groups/: Listing groups and join requests
- memberships/: Pending requests and their resolution
- users/: Listing users
- sandbox/: Storage-free rule evaluation
"""

from .groups import (
    JoinGroupUseCase,
    ListGroupsUseCase,
)
from .memberships import (
    ListPendingMembershipsUseCase,
    ResolveMembershipUseCase,
)
from .users import (
    ListUsersUseCase,
)
from .sandbox import (
    EvaluateSandboxUseCase,
)

__all__ = [
    # Groups
    "JoinGroupUseCase",
    "ListGroupsUseCase",
    # Memberships
    "ListPendingMembershipsUseCase",
    "ResolveMembershipUseCase",
    # Users
    "ListUsersUseCase",
    # Sandbox
    "EvaluateSandboxUseCase",
]
