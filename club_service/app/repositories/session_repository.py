from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from club_service.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session: Session) -> Session:
        """Update existing session"""
        pass

    @abstractmethod
    async def find_by_refresh_token(self, refresh_token: str) -> Optional[Session]:
        """Find session by the SHA-256 hash of a refresh token"""
        pass

    @abstractmethod
    async def revoke_all_by_user_id(self, user_id: UUID) -> int:
        """Revoke all sessions for a user. Returns count of revoked sessions."""
        pass
