"""
User Management Use Cases

All user-related business logic.
"""

from .change_role_use_case import ChangeRoleUseCase
from .dtos import UserInfo, UserListResponse
from .list_users_use_case import ListUsersUseCase
from .load_current_user_use_case import LoadCurrentUserUseCase

__all__ = [
    "LoadCurrentUserUseCase",
    "ListUsersUseCase",
    "ChangeRoleUseCase",
    "UserInfo",
    "UserListResponse",
]
