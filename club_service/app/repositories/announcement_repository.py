from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from club_service.domain.entities import Announcement


class IAnnouncementRepository(ABC):
    """Announcement repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, announcement_id: UUID) -> Optional[Announcement]:
        """Get announcement by ID"""
        pass

    @abstractmethod
    async def list_paginated(
        self, page: int, limit: int, club_id: Optional[UUID] = None
    ) -> Tuple[List[Announcement], int]:
        """List announcements newest first, returns (page, total count)"""
        pass

    @abstractmethod
    async def create(self, announcement: Announcement) -> Announcement:
        """Create a new announcement"""
        pass

    @abstractmethod
    async def delete(self, announcement: Announcement) -> None:
        """Delete an announcement"""
        pass

    @abstractmethod
    async def delete_by_club_id(self, club_id: UUID) -> int:
        """Delete every announcement of a club. Returns count."""
        pass
