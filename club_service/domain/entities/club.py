"""
Club Entity

Organizational entity owned by exactly one leader.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import ClubStatus


class Club(SQLModel, table=True):
    """
    Club entity.

    Business Rules:
    - Name must be unique
    - Exactly one leader (leader_id) at any time
    - Only ACTIVE clubs accept new join requests
    - Deleted by admins only; memberships are removed with the club
    """

    __tablename__ = "clubs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=255)
    description: str
    category: str = Field(max_length=100, index=True)

    status: ClubStatus = Field(default=ClubStatus.active)
    leader_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    meeting_day: Optional[str] = Field(default=None, max_length=50)
    meeting_time: Optional[str] = Field(default=None, max_length=50)
    location: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, onupdate=utcnow)
    )

    __table_args__ = (Index("idx_club_status", "status"),)
