from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from club_service.app.repositories.session_repository import ISessionRepository
from club_service.app.services.security import hash_refresh_token
from club_service.domain.base import utcnow
from club_service.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def update(self, session_obj: Session) -> Session:
        """Update existing session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def find_by_refresh_token(self, refresh_token: str) -> Optional[Session]:
        """
        Find session by refresh token.

        Revoked/expired sessions are returned as well; the use case checks
        them so it can return appropriate error messages.
        """
        stmt = select(Session).where(
            Session.refresh_token_hash == hash_refresh_token(refresh_token)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def revoke_all_by_user_id(self, user_id: UUID) -> int:
        stmt = select(Session).where(
            Session.user_id == user_id,
            Session.revoked == False,  # noqa: E712
        )
        result = await self.session.exec(stmt)
        sessions = list(result.all())
        now = utcnow()
        for session_obj in sessions:
            session_obj.revoked = True
            session_obj.revoked_at = now
            self.session.add(session_obj)
        await self.session.flush()
        return len(sessions)
