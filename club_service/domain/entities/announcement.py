"""
Announcement Entity

A message posted to a club by its leader.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import AnnouncementPriority


class Announcement(SQLModel, table=True):
    """
    Announcement entity.

    Business Rules:
    - Posted by the club's leader or an admin
    - Approved members are notified when one is posted
    - Deleted with its club
    """

    __tablename__ = "announcements"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    club_id: UUID = Field(foreign_key="clubs.id", nullable=False, index=True)
    author_id: UUID = Field(foreign_key="users.id", nullable=False)

    title: str = Field(max_length=255)
    content: str
    priority: AnnouncementPriority = Field(default=AnnouncementPriority.normal)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_announcement_created_at", "created_at"),)
