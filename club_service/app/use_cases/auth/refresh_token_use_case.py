"""
Refresh Token Use Case

Handles JWT token refresh with refresh token rotation.
"""

from club_service.libs.result import Error, Result, Return
from club_service.app.services.security import (
    hash_refresh_token,
    new_refresh_token,
    refresh_token_expiry,
)
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.api.utils.jwt import generate_jwt
from club_service.domain.base import utcnow

from .dtos import RefreshTokenResponse


class RefreshTokenUseCase:
    """
    Use case for refreshing JWT access tokens.

    Business Rules:
    - Refresh token rotation: old token invalidated, new token issued
    - Session must not be revoked or expired
    - The user must still exist and be active
    - The access token carries the user's current role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        async with self.uow:
            session = await self.uow.sessions.find_by_refresh_token(refresh_token)

            if session is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid refresh token"))

            if session.revoked:
                return Return.err(Error("SESSION_REVOKED", "Session has been revoked"))

            if session.expires_at < utcnow():
                return Return.err(Error("SESSION_EXPIRED", "Session has expired"))

            user = await self.uow.users.get_by_id(session.user_id)
            if user is None or not user.is_active:
                return Return.err(
                    Error("ACCOUNT_DEACTIVATED", "Account is deactivated")
                )

            new_token = new_refresh_token()
            session.refresh_token_hash = hash_refresh_token(new_token)
            session.expires_at = refresh_token_expiry()
            await self.uow.sessions.update(session)
            await self.uow.commit()

            return Return.ok(
                RefreshTokenResponse(
                    access_token=generate_jwt(user.id, user.role.value),
                    refresh_token=new_token,
                    session_id=str(session.id),
                )
            )
