"""
Announcement Use Cases
"""

from .create_announcement_use_case import CreateAnnouncementUseCase
from .delete_announcement_use_case import DeleteAnnouncementUseCase
from .dtos import (
    AnnouncementInfo,
    AnnouncementListResponse,
    CreateAnnouncementCommand,
    DeleteAnnouncementResponse,
)
from .list_announcements_use_case import ListAnnouncementsUseCase

__all__ = [
    "CreateAnnouncementUseCase",
    "DeleteAnnouncementUseCase",
    "ListAnnouncementsUseCase",
    "CreateAnnouncementCommand",
    "AnnouncementInfo",
    "AnnouncementListResponse",
    "DeleteAnnouncementResponse",
]
