"""
Notification Entity

Informational message addressed to a single user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Notification(SQLModel, table=True):
    """
    Notification entity.

    Business Rules:
    - Created as a side effect of workflow transitions, never blocks them
    - Only the recipient may mark it read or delete it
    - link is a loose deep link, not a relational reference
    """

    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    title: str = Field(max_length=255)
    message: str
    type: str = Field(max_length=50)  # e.g., "membership"
    link: Optional[str] = Field(default=None, max_length=500)

    is_read: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_notification_user_read", "user_id", "is_read"),
        Index("idx_notification_created_at", "created_at"),
    )
