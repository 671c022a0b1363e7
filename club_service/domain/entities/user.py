"""
User Entity

Represents a student, club leader or administrator.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - identity record.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash
    - role and club_id together determine authorization scope
    - club_id is only meaningful for CLUB_LEADER users
    - Deactivated (is_active=False) by an admin, never hard-deleted
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    student_id: Optional[str] = Field(default=None, unique=True, max_length=50)
    phone: Optional[str] = Field(default=None, max_length=50)
    bio: Optional[str] = Field(default=None)

    role: UserRole = Field(default=UserRole.member)
    is_active: bool = Field(default=True)

    # Club affiliation of a CLUB_LEADER (loose reference, no FK)
    club_id: Optional[UUID] = Field(default=None, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, onupdate=utcnow)
    )

    __table_args__ = (Index("idx_user_role", "role"),)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
