from typing import Optional
from uuid import UUID

from club_service.libs.result import Result, Return
from club_service.app.services.unit_of_work import UnitOfWork

from ..common import Pagination
from .dtos import AnnouncementInfo, AnnouncementListResponse


class ListAnnouncementsUseCase:
    """Public announcement feed, newest first, optionally for one club."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, page: int = 1, limit: int = 10, club_id: Optional[UUID] = None
    ) -> Result[AnnouncementListResponse]:
        async with self.uow:
            announcements, total = await self.uow.announcements.list_paginated(
                page, limit, club_id=club_id
            )
            clubs = {
                club.id: club
                for club in await self.uow.clubs.get_by_ids(
                    list({a.club_id for a in announcements})
                )
            }
            authors = {
                user.id: user
                for user in await self.uow.users.get_by_ids(
                    list({a.author_id for a in announcements})
                )
            }

            return Return.ok(
                AnnouncementListResponse(
                    announcements=[
                        AnnouncementInfo.from_entity(
                            a, club=clubs.get(a.club_id), author=authors.get(a.author_id)
                        )
                        for a in announcements
                    ],
                    pagination=Pagination.build(page, limit, total),
                )
            )
