import logging
from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteEventResponse

logger = logging.getLogger(__name__)


class DeleteEventUseCase:
    """
    Use case for deleting an event and its RSVPs.

    Event must exist (EVENT_NOT_FOUND); leader-owner of its club or admin.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, event_id: UUID) -> Result[DeleteEventResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            club = await self.uow.clubs.get_by_id(event.club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            denied = AuthorizationGuard.require_club_manager(actor, club)
            if denied is not None:
                return Return.err(denied)

            removed = await self.uow.rsvps.delete_by_event_id(event_id)
            await self.uow.events.delete(event)
            await self.uow.commit()
            logger.info(f"Event {event_id} deleted by user {actor.id}")

            return Return.ok(DeleteEventResponse(status="deleted", rsvps_removed=removed))
