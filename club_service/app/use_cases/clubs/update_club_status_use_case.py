import logging
from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.notifier import CLUB, Notifier
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import ClubStatus, UserRole

from .dtos import ClubInfo

logger = logging.getLogger(__name__)


class UpdateClubStatusUseCase:
    """
    Use case for activating, deactivating or suspending a club (admin only).

    Non-ACTIVE clubs stop accepting join requests. The club leader is
    notified of the change (best effort).
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, club_id: UUID, new_status: str
    ) -> Result[ClubInfo]:
        try:
            status = ClubStatus(new_status)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_STATUS",
                    "Status must be one of: ACTIVE, INACTIVE, SUSPENDED",
                )
            )

        async with self.uow:
            club = await self.uow.clubs.get_by_id(club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            denied = AuthorizationGuard.require_role(actor, UserRole.admin)
            if denied is not None:
                return Return.err(denied)

            club.status = status
            club = await self.uow.clubs.update(club)
            await self.uow.commit()
            logger.info(f"Club {club_id} status set to {status.value} by user {actor.id}")

            response = ClubInfo.from_entity(club)

            await Notifier(self.uow).enqueue(
                user_id=club.leader_id,
                title="Club Status Updated",
                message=f'Your club "{club.name}" is now {status.value.lower()}',
                type=CLUB,
                link=f"/clubs/{club_id}",
            )

            return Return.ok(response)
