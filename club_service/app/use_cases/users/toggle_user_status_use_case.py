import logging
from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import UserRole

from ..auth.dtos import UserInfo
from .dtos import ToggleStatusResponse

logger = logging.getLogger(__name__)


class ToggleUserStatusUseCase:
    """
    Activate or deactivate a user account (admin only).

    Admins cannot deactivate themselves. Deactivation revokes every open
    session of the user, so refresh tokens stop working immediately.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, user_id: UUID) -> Result[ToggleStatusResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            denied = AuthorizationGuard.require_role(actor, UserRole.admin)
            if denied is not None:
                return Return.err(denied)

            if user.id == actor.id:
                return Return.err(
                    Error("CANNOT_DEACTIVATE_SELF", "You cannot deactivate your own account")
                )

            user.is_active = not user.is_active
            revoked = 0
            if not user.is_active:
                revoked = await self.uow.sessions.revoke_all_by_user_id(user.id)

            user = await self.uow.users.update(user)
            await self.uow.commit()

            state = "activated" if user.is_active else "deactivated"
            logger.info(f"User {user_id} {state} by admin {actor.id}")

            return Return.ok(
                ToggleStatusResponse(
                    message=f"User {state}",
                    user=UserInfo.from_entity(user),
                    sessions_revoked=revoked,
                )
            )
