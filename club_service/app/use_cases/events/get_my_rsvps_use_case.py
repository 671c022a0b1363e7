from club_service.libs.result import Result, Return
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork

from .dtos import EventInfo, MyRsvpItem, MyRsvpsResponse, RsvpInfo


class GetMyRsvpsUseCase:
    """The caller's RSVPs with their events, soonest event first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor) -> Result[MyRsvpsResponse]:
        async with self.uow:
            rsvps = await self.uow.rsvps.get_by_user_id(actor.id)
            events = {
                event.id: event
                for event in await self.uow.events.get_by_ids(
                    [rsvp.event_id for rsvp in rsvps]
                )
            }
            clubs = {
                club.id: club
                for club in await self.uow.clubs.get_by_ids(
                    list({event.club_id for event in events.values()})
                )
            }

            return Return.ok(
                MyRsvpsResponse(
                    rsvps=[
                        MyRsvpItem(
                            rsvp=RsvpInfo.from_entity(rsvp),
                            event=EventInfo.from_entity(
                                events[rsvp.event_id],
                                club=clubs.get(events[rsvp.event_id].club_id),
                            ),
                        )
                        for rsvp in rsvps
                        if rsvp.event_id in events
                    ]
                )
            )
