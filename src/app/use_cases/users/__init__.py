"""
User Use Cases
"""

from .dtos import ListUsersResponse, UserInfo
from .list_users_use_case import ListUsersUseCase

__all__ = [
    "ListUsersUseCase",
    "ListUsersResponse",
    "UserInfo",
]
