"""
RSVP Event Use Case

Record or change the caller's answer to an event.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import EventRsvp, RsvpStatus

from .dtos import RsvpInfo, RsvpResponse

logger = logging.getLogger(__name__)


class RsvpEventUseCase:
    """
    Use case for answering an event.

    Business Rules:
    - status must be GOING, MAYBE or NOT_GOING (INVALID_STATUS)
    - Event must exist (EVENT_NOT_FOUND)
    - A GOING answer is refused once GOING RSVPs reach capacity (EVENT_FULL);
      a caller who is already GOING keeps their seat
    - One RSVP per (user, event): answering again updates the row
    - A concurrent duplicate insert loses on the unique index (RSVP_CONFLICT)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, event_id: UUID, new_status: str
    ) -> Result[RsvpResponse]:
        try:
            status = RsvpStatus(new_status)
        except ValueError:
            return Return.err(
                Error("INVALID_STATUS", "Status must be one of: GOING, MAYBE, NOT_GOING")
            )

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            existing = await self.uow.rsvps.get_by_user_and_event(actor.id, event_id)
            already_going = existing is not None and existing.status == RsvpStatus.going

            if event.capacity and status == RsvpStatus.going and not already_going:
                going = await self.uow.rsvps.count_by_event_and_status(
                    event_id, RsvpStatus.going
                )
                if going >= event.capacity:
                    return Return.err(
                        Error("EVENT_FULL", "Event is at full capacity")
                    )

            if existing is not None:
                existing.status = status
                rsvp = await self.uow.rsvps.update(existing)
            else:
                try:
                    rsvp = await self.uow.rsvps.create(
                        EventRsvp(user_id=actor.id, event_id=event_id, status=status)
                    )
                except IntegrityError:
                    return Return.err(
                        Error("RSVP_CONFLICT", "Your RSVP changed meanwhile, please retry")
                    )

            await self.uow.commit()
            logger.info(f"User {actor.id} RSVP {status.value} to event {event_id}")

            return Return.ok(
                RsvpResponse(
                    message=f"RSVP updated to {status.value}",
                    rsvp=RsvpInfo.from_entity(rsvp),
                )
            )
