"""
Event Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the event domain.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from club_service.domain.entities import Club, Event, EventRsvp, User

from ..common import Pagination


# ============================================================================
# Command DTOs
# ============================================================================


class CreateEventCommand(BaseModel):
    """Validated intent to schedule an event for a club"""

    club_id: UUID
    title: str
    description: str
    date: datetime
    end_date: Optional[datetime] = None
    time: str
    location: str
    capacity: Optional[int] = None
    is_public: bool = True


class UpdateEventCommand(BaseModel):
    """Partial event update - only fields that were sent are applied"""

    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    time: Optional[str] = None
    location: Optional[str] = None
    capacity: Optional[int] = None
    is_public: Optional[bool] = None


# ============================================================================
# Response DTOs
# ============================================================================


class EventClubInfo(BaseModel):
    id: str
    name: str


class EventInfo(BaseModel):
    """An event as returned to clients"""

    id: str
    club_id: str
    creator_id: str
    title: str
    description: str
    date: str
    end_date: Optional[str] = None
    time: str
    location: str
    capacity: Optional[int] = None
    is_public: bool
    going_count: int = 0
    created_at: str
    club: Optional[EventClubInfo] = None

    @classmethod
    def from_entity(
        cls, event: Event, going_count: int = 0, club: Optional[Club] = None
    ) -> "EventInfo":
        return cls(
            id=str(event.id),
            club_id=str(event.club_id),
            creator_id=str(event.creator_id),
            title=event.title,
            description=event.description,
            date=event.date.isoformat(),
            end_date=event.end_date.isoformat() if event.end_date else None,
            time=event.time,
            location=event.location,
            capacity=event.capacity,
            is_public=event.is_public,
            going_count=going_count,
            created_at=event.created_at.isoformat(),
            club=EventClubInfo(id=str(club.id), name=club.name) if club else None,
        )


class EventListResponse(BaseModel):
    """Response for list events use case"""

    events: List[EventInfo]
    pagination: Pagination


class EventAttendee(BaseModel):
    """One RSVP of an event with the user's name"""

    user_id: str
    first_name: str
    last_name: str
    status: str

    @classmethod
    def from_entity(cls, rsvp: EventRsvp, user: User) -> "EventAttendee":
        return cls(
            user_id=str(rsvp.user_id),
            first_name=user.first_name,
            last_name=user.last_name,
            status=rsvp.status.value,
        )


class EventDetailResponse(EventInfo):
    """Event with its RSVPs"""

    rsvps: List[EventAttendee] = []


class DeleteEventResponse(BaseModel):
    """Response for delete event use case"""

    status: str
    rsvps_removed: int


class RsvpInfo(BaseModel):
    id: str
    event_id: str
    user_id: str
    status: str
    updated_at: str

    @classmethod
    def from_entity(cls, rsvp: EventRsvp) -> "RsvpInfo":
        return cls(
            id=str(rsvp.id),
            event_id=str(rsvp.event_id),
            user_id=str(rsvp.user_id),
            status=rsvp.status.value,
            updated_at=rsvp.updated_at.isoformat(),
        )


class RsvpResponse(BaseModel):
    """Response for RSVP use case"""

    message: str
    rsvp: RsvpInfo


class MyRsvpItem(BaseModel):
    rsvp: RsvpInfo
    event: EventInfo


class MyRsvpsResponse(BaseModel):
    """The caller's RSVPs, soonest event first"""

    rsvps: List[MyRsvpItem]
