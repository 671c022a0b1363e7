"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
"""

from typing import List, Optional

from pydantic import BaseModel

from club_service.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - validated registration intent

    Created by the API layer after request validation passes.
    """

    email: str
    password: str
    first_name: str
    last_name: str
    student_id: Optional[str] = None
    phone: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User information in auth and admin responses (never the password hash)"""

    id: str
    email: str
    first_name: str
    last_name: str
    student_id: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    role: str
    is_active: bool
    club_id: Optional[str] = None
    created_at: str

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            student_id=user.student_id,
            phone=user.phone,
            bio=user.bio,
            role=user.role.value,
            is_active=user.is_active,
            club_id=str(user.club_id) if user.club_id else None,
            created_at=user.created_at.isoformat(),
        )


class AuthResponse(BaseModel):
    """Response for register and login use cases"""

    user: UserInfo
    access_token: str
    refresh_token: str
    session_id: str


class RefreshTokenResponse(BaseModel):
    """Response for refresh token use case"""

    access_token: str
    refresh_token: str
    session_id: str


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    status: str
    sessions_revoked: int


class ProfileMembership(BaseModel):
    """Approved membership shown on the profile"""

    club_id: str
    club_name: str
    category: str
    joined_at: Optional[str] = None


class ProfileResponse(BaseModel):
    """Response for get profile use case"""

    user: UserInfo
    memberships: List[ProfileMembership]
