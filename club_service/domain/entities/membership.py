"""
Membership Entity

Links a User to a Club with a request status.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import MembershipStatus


class Membership(SQLModel, table=True):
    """
    Membership entity - a user's relationship to a club.

    Business Rules:
    - (user_id, club_id) must be unique; re-joining after rejection
      mutates the existing row
    - joined_at is set only while status is APPROVED
    - Deleted on leave or removal
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    club_id: UUID = Field(foreign_key="clubs.id", nullable=False, index=True)

    status: MembershipStatus = Field(default=MembershipStatus.pending)
    joined_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, onupdate=utcnow)
    )

    __table_args__ = (
        Index("idx_membership_user_club", "user_id", "club_id", unique=True),
        Index("idx_membership_club_status", "club_id", "status"),
    )
