"""
Notification Use Cases

Owner-scoped read API over the notification side-channel.
"""

from .delete_notification_use_case import DeleteNotificationUseCase
from .dtos import (
    DeleteNotificationResponse,
    MarkAllReadResponse,
    NotificationInfo,
    NotificationListResponse,
)
from .list_notifications_use_case import ListNotificationsUseCase
from .mark_notification_read_use_case import (
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)

__all__ = [
    "ListNotificationsUseCase",
    "MarkNotificationReadUseCase",
    "MarkAllNotificationsReadUseCase",
    "DeleteNotificationUseCase",
    "NotificationInfo",
    "NotificationListResponse",
    "MarkAllReadResponse",
    "DeleteNotificationResponse",
]
