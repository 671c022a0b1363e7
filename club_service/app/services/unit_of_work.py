from abc import ABC, abstractmethod

from club_service.app.repositories.announcement_repository import IAnnouncementRepository
from club_service.app.repositories.club_repository import IClubRepository
from club_service.app.repositories.event_repository import IEventRepository
from club_service.app.repositories.event_rsvp_repository import IEventRsvpRepository
from club_service.app.repositories.membership_repository import IMembershipRepository
from club_service.app.repositories.notification_repository import INotificationRepository
from club_service.app.repositories.session_repository import ISessionRepository
from club_service.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    clubs: IClubRepository
    memberships: IMembershipRepository
    notifications: INotificationRepository
    sessions: ISessionRepository
    events: IEventRepository
    rsvps: IEventRsvpRepository
    announcements: IAnnouncementRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
