"""
Notification Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from club_service.domain.entities import Notification

from ..common import Pagination


class NotificationInfo(BaseModel):
    """A notification as returned to its owner"""

    id: str
    title: str
    message: str
    type: str
    link: Optional[str] = None
    is_read: bool
    created_at: str

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationInfo":
        return cls(
            id=str(notification.id),
            title=notification.title,
            message=notification.message,
            type=notification.type,
            link=notification.link,
            is_read=notification.is_read,
            created_at=notification.created_at.isoformat(),
        )


class NotificationListResponse(BaseModel):
    """Response for list notifications use case"""

    notifications: List[NotificationInfo]
    unread_count: int
    pagination: Pagination


class MarkAllReadResponse(BaseModel):
    """Response for mark all read use case"""

    status: str
    updated: int


class DeleteNotificationResponse(BaseModel):
    """Response for delete notification use case"""

    status: str
