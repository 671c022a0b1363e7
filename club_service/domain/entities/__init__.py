"""
Club Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    UserRole,
    ClubStatus,
    MembershipStatus,
    RsvpStatus,
    AnnouncementPriority,
)

# Export all entities
from .user import User
from .club import Club
from .membership import Membership
from .notification import Notification
from .session import Session
from .event import Event
from .event_rsvp import EventRsvp
from .announcement import Announcement

__all__ = [
    # Enums
    "UserRole",
    "ClubStatus",
    "MembershipStatus",
    "RsvpStatus",
    "AnnouncementPriority",
    # Entities
    "User",
    "Club",
    "Membership",
    "Notification",
    "Session",
    "Event",
    "EventRsvp",
    "Announcement",
]
