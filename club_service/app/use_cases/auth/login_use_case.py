"""
Login Use Case

Authenticates a user and opens a new session.
"""

import logging

from club_service.libs.result import Error, Result, Return
from club_service.app.services.security import (
    hash_password,
    new_refresh_token,
    open_session,
    verify_password,
)
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.api.utils.jwt import generate_jwt

from .dtos import AuthResponse, UserInfo

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password give the same INVALID_CREDENTIALS
    - A password hash is computed even for unknown emails
    - Deactivated users cannot log in (ACCOUNT_DEACTIVATED)
    - Each login creates a new session with its own refresh token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse containing tokens and the user, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email.lower())

            if user is None:
                # Keep response time close to the wrong-password path
                hash_password(password)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not user.is_active:
                return Return.err(
                    Error("ACCOUNT_DEACTIVATED", "Account is deactivated")
                )

            refresh_token = new_refresh_token()
            session = await self.uow.sessions.create(
                open_session(user.id, refresh_token)
            )

            await self.uow.commit()
            logger.info(f"User {user.id} logged in (session {session.id})")

            return Return.ok(
                AuthResponse(
                    user=UserInfo.from_entity(user),
                    access_token=generate_jwt(user.id, user.role.value),
                    refresh_token=refresh_token,
                    session_id=str(session.id),
                )
            )
