"""
Event Use Cases

Club event calendar and RSVPs.
"""

from .create_event_use_case import CreateEventUseCase
from .delete_event_use_case import DeleteEventUseCase
from .dtos import (
    CreateEventCommand,
    DeleteEventResponse,
    EventDetailResponse,
    EventInfo,
    EventListResponse,
    MyRsvpsResponse,
    RsvpResponse,
    UpdateEventCommand,
)
from .get_event_use_case import GetEventUseCase
from .get_my_rsvps_use_case import GetMyRsvpsUseCase
from .list_events_use_case import ListEventsUseCase
from .rsvp_event_use_case import RsvpEventUseCase
from .update_event_use_case import UpdateEventUseCase

__all__ = [
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "DeleteEventUseCase",
    "GetEventUseCase",
    "ListEventsUseCase",
    "RsvpEventUseCase",
    "GetMyRsvpsUseCase",
    "CreateEventCommand",
    "UpdateEventCommand",
    "EventInfo",
    "EventDetailResponse",
    "EventListResponse",
    "DeleteEventResponse",
    "RsvpResponse",
    "MyRsvpsResponse",
]
