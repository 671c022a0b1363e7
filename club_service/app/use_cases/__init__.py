"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, tokens, profile
- clubs/: Club directory and lifecycle
- memberships/: Join, approval, leave and removal workflows
- notifications/: Notification read API
- users/: User administration
- events/: Event calendar and RSVPs
- announcements/: Club announcements
- admin/: Admin dashboard and activity log

Import from subdirectories for better organization.
"""

from .admin import GetActivityLogUseCase, GetDashboardUseCase
from .announcements import (
    CreateAnnouncementUseCase,
    DeleteAnnouncementUseCase,
    ListAnnouncementsUseCase,
)
from .auth import (
    GetProfileUseCase,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
    RegisterUseCase,
)
from .clubs import (
    CreateClubUseCase,
    DeleteClubUseCase,
    GetClubStatsUseCase,
    GetClubUseCase,
    ListCategoriesUseCase,
    ListClubMembersUseCase,
    ListClubsUseCase,
    UpdateClubStatusUseCase,
    UpdateClubUseCase,
)
from .events import (
    CreateEventUseCase,
    DeleteEventUseCase,
    GetEventUseCase,
    GetMyRsvpsUseCase,
    ListEventsUseCase,
    RsvpEventUseCase,
    UpdateEventUseCase,
)
from .memberships import (
    CheckMembershipUseCase,
    GetMyMembershipsUseCase,
    JoinClubUseCase,
    LeaveClubUseCase,
    RemoveMemberUseCase,
    UpdateMembershipStatusUseCase,
)
from .notifications import (
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from .users import ChangeRoleUseCase, ListUsersUseCase, ToggleUserStatusUseCase

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "GetProfileUseCase",
    # Clubs
    "CreateClubUseCase",
    "UpdateClubUseCase",
    "UpdateClubStatusUseCase",
    "DeleteClubUseCase",
    "GetClubUseCase",
    "ListClubsUseCase",
    "ListCategoriesUseCase",
    "ListClubMembersUseCase",
    "GetClubStatsUseCase",
    # Memberships
    "JoinClubUseCase",
    "UpdateMembershipStatusUseCase",
    "LeaveClubUseCase",
    "RemoveMemberUseCase",
    "GetMyMembershipsUseCase",
    "CheckMembershipUseCase",
    # Events
    "ListEventsUseCase",
    "GetEventUseCase",
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "DeleteEventUseCase",
    "RsvpEventUseCase",
    "GetMyRsvpsUseCase",
    # Announcements
    "ListAnnouncementsUseCase",
    "CreateAnnouncementUseCase",
    "DeleteAnnouncementUseCase",
    # Notifications
    "ListNotificationsUseCase",
    "MarkNotificationReadUseCase",
    "MarkAllNotificationsReadUseCase",
    "DeleteNotificationUseCase",
    # Users
    "ListUsersUseCase",
    "ChangeRoleUseCase",
    "ToggleUserStatusUseCase",
    # Admin
    "GetDashboardUseCase",
    "GetActivityLogUseCase",
]
