from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from club_service.domain.entities import Event


class IEventRepository(ABC):
    """Event repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, event_ids: List[UUID]) -> List[Event]:
        """Get several events at once"""
        pass

    @abstractmethod
    async def list_paginated(
        self,
        page: int,
        limit: int,
        club_id: Optional[UUID] = None,
        upcoming: bool = False,
        search: Optional[str] = None,
    ) -> Tuple[List[Event], int]:
        """List events soonest first, returns (page of events, total count)"""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Create a new event"""
        pass

    @abstractmethod
    async def update(self, event: Event) -> Event:
        """Update existing event"""
        pass

    @abstractmethod
    async def delete(self, event: Event) -> None:
        """Hard-delete an event"""
        pass

    @abstractmethod
    async def delete_by_club_id(self, club_id: UUID) -> int:
        """Delete every event of a club. Returns count."""
        pass

    @abstractmethod
    async def count(self, upcoming: bool = False) -> int:
        """Count events, optionally only those not yet started"""
        pass
