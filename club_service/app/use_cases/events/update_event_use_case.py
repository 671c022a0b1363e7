from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.base import to_naive_utc

from .dtos import EventInfo, UpdateEventCommand


class UpdateEventUseCase:
    """
    Use case for editing an event.

    Business Rules:
    - Event must exist (EVENT_NOT_FOUND), checked before permissions
    - Leader-owner of the event's club or admin only (FORBIDDEN)
    - The resulting end_date must not precede date (INVALID_DATE_RANGE)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, event_id: UUID, command: UpdateEventCommand
    ) -> Result[EventInfo]:
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

            changes = command.model_dump(exclude_unset=True, exclude_none=True)
            for field in ("date", "end_date"):
                if field in changes:
                    changes[field] = to_naive_utc(changes[field])

            date = changes.get("date", event.date)
            end_date = changes.get("end_date", event.end_date)
            if end_date is not None and end_date < date:
                return Return.err(
                    Error("INVALID_DATE_RANGE", "End date cannot be before the start date")
                )

            for field, value in changes.items():
                setattr(event, field, value)

            event = await self.uow.events.update(event)
            going = await self.uow.rsvps.count_going_by_event_ids([event.id])

            await self.uow.commit()

            return Return.ok(
                EventInfo.from_entity(event, going_count=going.get(event.id, 0), club=club)
            )
