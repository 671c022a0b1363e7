from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from club_service.domain.entities import EventRsvp, RsvpStatus


class IEventRsvpRepository(ABC):
    """Event RSVP repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_event(
        self, user_id: UUID, event_id: UUID
    ) -> Optional[EventRsvp]:
        """Get a user's RSVP to an event"""
        pass

    @abstractmethod
    async def get_by_event_id(self, event_id: UUID) -> List[EventRsvp]:
        """All RSVPs of an event"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[EventRsvp]:
        """All RSVPs of a user"""
        pass

    @abstractmethod
    async def create(self, rsvp: EventRsvp) -> EventRsvp:
        """Create a new RSVP"""
        pass

    @abstractmethod
    async def update(self, rsvp: EventRsvp) -> EventRsvp:
        """Update existing RSVP"""
        pass

    @abstractmethod
    async def count_by_event_and_status(
        self, event_id: UUID, status: RsvpStatus
    ) -> int:
        """Count RSVPs of an event with the given status"""
        pass

    @abstractmethod
    async def count_going_by_event_ids(self, event_ids: List[UUID]) -> Dict[UUID, int]:
        """GOING counts for several events at once"""
        pass

    @abstractmethod
    async def delete_by_event_id(self, event_id: UUID) -> int:
        """Delete all RSVPs of an event. Returns count."""
        pass

    @abstractmethod
    async def delete_by_club_id(self, club_id: UUID) -> int:
        """Delete all RSVPs to any event of a club. Returns count."""
        pass
