from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from club_service.domain.entities import Notification


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, notification_id: UUID) -> Optional[Notification]:
        """Get notification by ID"""
        pass

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        pass

    @abstractmethod
    async def update(self, notification: Notification) -> Notification:
        """Update existing notification"""
        pass

    @abstractmethod
    async def delete(self, notification: Notification) -> None:
        """Delete a notification"""
        pass

    @abstractmethod
    async def get_by_user_paginated(
        self, user_id: UUID, page: int, limit: int, unread_only: bool = False
    ) -> Tuple[List[Notification], int]:
        """Notifications of a user newest first, returns (page, total count)"""
        pass

    @abstractmethod
    async def count_unread(self, user_id: UUID) -> int:
        """Count unread notifications of a user"""
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification of a user as read. Returns count."""
        pass

    @abstractmethod
    async def list_paginated(
        self, page: int, limit: int
    ) -> Tuple[List[Notification], int]:
        """All notifications newest first, returns (page, total count)"""
        pass
