"""
Event Entity

A dated club activity that users can RSVP to.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Event(SQLModel, table=True):
    """
    Event entity.

    Business Rules:
    - Belongs to exactly one club; created by its leader or an admin
    - capacity (when set) caps the number of GOING RSVPs
    - Deleted with its club; RSVPs are removed with the event
    """

    __tablename__ = "events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    club_id: UUID = Field(foreign_key="clubs.id", nullable=False, index=True)
    creator_id: UUID = Field(foreign_key="users.id", nullable=False)

    title: str = Field(max_length=255)
    description: str
    date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    time: str = Field(max_length=50)
    location: str = Field(max_length=255)
    capacity: Optional[int] = Field(default=None)
    is_public: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, onupdate=utcnow)
    )

    __table_args__ = (Index("idx_event_club_date", "club_id", "date"),)
