import logging
from typing import Optional

from club_service.libs.result import Result, Return
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.base import utcnow

from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Revoke the session behind the given refresh token, or every session
    of the caller when no token is given.

    Tokens that are unknown or belong to someone else revoke nothing.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, refresh_token: Optional[str] = None
    ) -> Result[LogoutResponse]:
        async with self.uow:
            if refresh_token is None:
                revoked = await self.uow.sessions.revoke_all_by_user_id(actor.id)
            else:
                revoked = 0
                session = await self.uow.sessions.find_by_refresh_token(refresh_token)
                if (
                    session is not None
                    and session.user_id == actor.id
                    and not session.revoked
                ):
                    session.revoked = True
                    session.revoked_at = utcnow()
                    await self.uow.sessions.update(session)
                    revoked = 1

            await self.uow.commit()
            logger.info(f"User {actor.id} logged out ({revoked} sessions revoked)")

            return Return.ok(
                LogoutResponse(status="logged_out", sessions_revoked=revoked)
            )
