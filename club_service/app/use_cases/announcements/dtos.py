"""
Announcement Use Case DTOs
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from club_service.domain.entities import Announcement, AnnouncementPriority, Club, User

from ..common import Pagination


class CreateAnnouncementCommand(BaseModel):
    """Validated intent to post an announcement to a club"""

    club_id: UUID
    title: str
    content: str
    priority: AnnouncementPriority = AnnouncementPriority.normal


class AnnouncementAuthor(BaseModel):
    id: str
    first_name: str
    last_name: str


class AnnouncementInfo(BaseModel):
    """An announcement as returned to clients"""

    id: str
    club_id: str
    club_name: Optional[str] = None
    title: str
    content: str
    priority: str
    created_at: str
    author: Optional[AnnouncementAuthor] = None

    @classmethod
    def from_entity(
        cls,
        announcement: Announcement,
        club: Optional[Club] = None,
        author: Optional[User] = None,
    ) -> "AnnouncementInfo":
        return cls(
            id=str(announcement.id),
            club_id=str(announcement.club_id),
            club_name=club.name if club is not None else None,
            title=announcement.title,
            content=announcement.content,
            priority=announcement.priority.value,
            created_at=announcement.created_at.isoformat(),
            author=(
                AnnouncementAuthor(
                    id=str(author.id),
                    first_name=author.first_name,
                    last_name=author.last_name,
                )
                if author is not None
                else None
            ),
        )


class AnnouncementListResponse(BaseModel):
    """Response for list announcements use case"""

    announcements: List[AnnouncementInfo]
    pagination: Pagination


class DeleteAnnouncementResponse(BaseModel):
    """Response for delete announcement use case"""

    status: str
