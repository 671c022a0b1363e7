import logging
from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteAnnouncementResponse

logger = logging.getLogger(__name__)


class DeleteAnnouncementUseCase:
    """Leader-owner of the announcement's club or admin removes it."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, announcement_id: UUID
    ) -> Result[DeleteAnnouncementResponse]:
        async with self.uow:
            announcement = await self.uow.announcements.get_by_id(announcement_id)
            if announcement is None:
                return Return.err(
                    Error("ANNOUNCEMENT_NOT_FOUND", "Announcement not found")
                )

            club = await self.uow.clubs.get_by_id(announcement.club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            denied = AuthorizationGuard.require_club_manager(actor, club)
            if denied is not None:
                return Return.err(denied)

            await self.uow.announcements.delete(announcement)
            await self.uow.commit()
            logger.info(f"Announcement {announcement_id} deleted by user {actor.id}")

            return Return.ok(DeleteAnnouncementResponse(status="deleted"))
