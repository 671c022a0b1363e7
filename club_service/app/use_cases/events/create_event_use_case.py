"""
Create Event Use Case

A club's leader (or an admin) schedules an event; approved members
are notified.
"""

import logging

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.notifier import EVENT, Notifier
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.base import to_naive_utc
from club_service.domain.entities import Event, MembershipStatus

from .dtos import CreateEventCommand, EventInfo

logger = logging.getLogger(__name__)


class CreateEventUseCase:
    """
    Use case for creating an event.

    Business Rules:
    - Club must exist (CLUB_NOT_FOUND), checked before permissions
    - Leader-owner or admin only (FORBIDDEN)
    - end_date, when given, must not precede date (INVALID_DATE_RANGE)
    - Every APPROVED member except the creator is notified (best effort)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, command: CreateEventCommand
    ) -> Result[EventInfo]:
        async with self.uow:
            club = await self.uow.clubs.get_by_id(command.club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            denied = AuthorizationGuard.require_club_manager(actor, club)
            if denied is not None:
                return Return.err(denied)

            date = to_naive_utc(command.date)
            end_date = to_naive_utc(command.end_date) if command.end_date else None
            if end_date is not None and end_date < date:
                return Return.err(
                    Error("INVALID_DATE_RANGE", "End date cannot be before the start date")
                )

            event = await self.uow.events.create(
                Event(
                    club_id=club.id,
                    creator_id=actor.id,
                    title=command.title,
                    description=command.description,
                    date=date,
                    end_date=end_date,
                    time=command.time,
                    location=command.location,
                    capacity=command.capacity,
                    is_public=command.is_public,
                )
            )
            members = await self.uow.memberships.get_by_club_id(
                club.id, MembershipStatus.approved
            )

            await self.uow.commit()
            logger.info(f"Event {event.id} created in club {club.id} by user {actor.id}")

            response = EventInfo.from_entity(event, club=club)

            await Notifier(self.uow).enqueue_many(
                [m.user_id for m in members if m.user_id != actor.id],
                title="New Event",
                message=f'New event "{event.title}" has been created in {club.name}',
                type=EVENT,
                link=f"/events/{event.id}",
            )

            return Return.ok(response)
