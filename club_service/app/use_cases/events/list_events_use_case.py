from typing import Optional
from uuid import UUID

from club_service.libs.result import Result, Return
from club_service.app.services.unit_of_work import UnitOfWork

from ..common import Pagination
from .dtos import EventInfo, EventListResponse


class ListEventsUseCase:
    """
    Public event calendar.

    Filters: club, upcoming only (date >= now), free-text search on
    title/description. Soonest first.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        page: int = 1,
        limit: int = 10,
        club_id: Optional[UUID] = None,
        upcoming: bool = False,
        search: Optional[str] = None,
    ) -> Result[EventListResponse]:
        async with self.uow:
            events, total = await self.uow.events.list_paginated(
                page, limit, club_id=club_id, upcoming=upcoming, search=search
            )
            event_ids = [event.id for event in events]
            going = await self.uow.rsvps.count_going_by_event_ids(event_ids)
            clubs = {
                club.id: club
                for club in await self.uow.clubs.get_by_ids(
                    list({event.club_id for event in events})
                )
            }

            return Return.ok(
                EventListResponse(
                    events=[
                        EventInfo.from_entity(
                            event,
                            going_count=going.get(event.id, 0),
                            club=clubs.get(event.club_id),
                        )
                        for event in events
                    ],
                    pagination=Pagination.build(page, limit, total),
                )
            )
