from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import RsvpStatus

from .dtos import EventAttendee, EventDetailResponse, EventInfo


class GetEventUseCase:
    """Public event details with the list of RSVPs."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event_id: UUID) -> Result[EventDetailResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            club = await self.uow.clubs.get_by_id(event.club_id)
            rsvps = await self.uow.rsvps.get_by_event_id(event_id)
            users = {
                user.id: user
                for user in await self.uow.users.get_by_ids(
                    [rsvp.user_id for rsvp in rsvps]
                )
            }
            going_count = sum(1 for rsvp in rsvps if rsvp.status == RsvpStatus.going)

            info = EventInfo.from_entity(event, going_count=going_count, club=club)
            return Return.ok(
                EventDetailResponse(
                    **info.model_dump(),
                    rsvps=[
                        EventAttendee.from_entity(rsvp, users[rsvp.user_id])
                        for rsvp in rsvps
                        if rsvp.user_id in users
                    ],
                )
            )
