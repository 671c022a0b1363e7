from sqlmodel.ext.asyncio.session import AsyncSession

from club_service.adapter.repositories.announcement_repository import AnnouncementRepository
from club_service.adapter.repositories.club_repository import ClubRepository
from club_service.adapter.repositories.event_repository import EventRepository
from club_service.adapter.repositories.event_rsvp_repository import EventRsvpRepository
from club_service.adapter.repositories.membership_repository import MembershipRepository
from club_service.adapter.repositories.notification_repository import NotificationRepository
from club_service.adapter.repositories.session_repository import SessionRepository
from club_service.adapter.repositories.user_repository import UserRepository
from club_service.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.clubs = ClubRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.events = EventRepository(self.session)
        self.rsvps = EventRsvpRepository(self.session)
        self.announcements = AnnouncementRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
