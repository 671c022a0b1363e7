"""
Event RSVP Entity
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import RsvpStatus


class EventRsvp(SQLModel, table=True):
    """
    One user's RSVP to one event.

    Business Rules:
    - (user_id, event_id) must be unique; answering again updates the row
    """

    __tablename__ = "event_rsvps"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    status: RsvpStatus = Field(default=RsvpStatus.going)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, onupdate=utcnow)
    )

    __table_args__ = (
        Index("idx_rsvp_user_event", "user_id", "event_id", unique=True),
        Index("idx_rsvp_event_status", "event_id", "status"),
    )
