"""
Register Use Case

Creates a MEMBER account and opens its first session.
"""

import logging

from club_service.libs.result import Error, Result, Return
from club_service.app.services.security import (
    hash_password,
    new_refresh_token,
    open_session,
)
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.api.utils.jwt import generate_jwt
from club_service.domain.entities import User, UserRole

from .dtos import AuthResponse, RegisterCommand, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[AuthResponse] (user, access and refresh tokens)

    Business Logic:
    1. Reject a duplicate email (EMAIL_ALREADY_EXISTS)
    2. Reject a duplicate student id (STUDENT_ID_EXISTS)
    3. Hash password with bcrypt
    4. Create User with role=MEMBER
    5. Create Session holding the SHA-256 of a new refresh token
    6. Commit and issue the JWT access token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        email = command.email.lower()

        async with self.uow:
            if await self.uow.users.get_by_email(email) is not None:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            if command.student_id:
                existing = await self.uow.users.get_by_student_id(command.student_id)
                if existing is not None:
                    return Return.err(
                        Error("STUDENT_ID_EXISTS", "Student ID already registered")
                    )

            user = await self.uow.users.create(
                User(
                    email=email,
                    password_hash=hash_password(command.password),
                    first_name=command.first_name,
                    last_name=command.last_name,
                    student_id=command.student_id or None,
                    phone=command.phone,
                    role=UserRole.member,
                )
            )

            refresh_token = new_refresh_token()
            session = await self.uow.sessions.create(
                open_session(user.id, refresh_token)
            )

            await self.uow.commit()
            logger.info(f"User {user.id} registered")

            return Return.ok(
                AuthResponse(
                    user=UserInfo.from_entity(user),
                    access_token=generate_jwt(user.id, user.role.value),
                    refresh_token=refresh_token,
                    session_id=str(session.id),
                )
            )
