"""
Club Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Global role of a user"""

    admin = "ADMIN"
    club_leader = "CLUB_LEADER"
    member = "MEMBER"


class ClubStatus(str, Enum):
    """Club status - only active clubs accept join requests"""

    active = "ACTIVE"
    inactive = "INACTIVE"
    suspended = "SUSPENDED"


class MembershipStatus(str, Enum):
    """Membership status"""

    pending = "PENDING"
    approved = "APPROVED"
    rejected = "REJECTED"


class RsvpStatus(str, Enum):
    """A user's answer to an event invitation"""

    going = "GOING"
    maybe = "MAYBE"
    not_going = "NOT_GOING"


class AnnouncementPriority(str, Enum):
    """Announcement priority - display hint only"""

    low = "low"
    normal = "normal"
    high = "high"
    urgent = "urgent"
