"""
User Administration Use Cases
"""

from .change_role_use_case import ChangeRoleUseCase
from .dtos import (
    ChangeRoleCommand,
    ChangeRoleResponse,
    ToggleStatusResponse,
    UserListResponse,
)
from .list_users_use_case import ListUsersUseCase
from .toggle_user_status_use_case import ToggleUserStatusUseCase

__all__ = [
    "ListUsersUseCase",
    "ChangeRoleUseCase",
    "ToggleUserStatusUseCase",
    "ChangeRoleCommand",
    "ChangeRoleResponse",
    "ToggleStatusResponse",
    "UserListResponse",
]
