"""
Authentication Use Cases

Registration, login, token refresh, logout and profile.
"""

from .dtos import (
    AuthResponse,
    LogoutResponse,
    ProfileMembership,
    ProfileResponse,
    RefreshTokenResponse,
    RegisterCommand,
    UserInfo,
)
from .get_profile_use_case import GetProfileUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .register_use_case import RegisterUseCase

__all__ = [
    "RegisterUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "GetProfileUseCase",
    "RegisterCommand",
    "UserInfo",
    "AuthResponse",
    "RefreshTokenResponse",
    "LogoutResponse",
    "ProfileMembership",
    "ProfileResponse",
]
