from typing import Optional

from club_service.libs.result import Error, Result, Return
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import ClubStatus

from .dtos import CategoriesResponse, ClubInfo, ClubListResponse, Pagination


class ListClubsUseCase:
    """
    Public club directory.

    Filters: free-text search on name/description, category, status.
    Only ACTIVE clubs are listed unless another status is requested.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        page: int = 1,
        limit: int = 12,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Result[ClubListResponse]:
        try:
            club_status = ClubStatus(status) if status else ClubStatus.active
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_STATUS",
                    "Status must be one of: ACTIVE, INACTIVE, SUSPENDED",
                )
            )

        async with self.uow:
            clubs, total = await self.uow.clubs.list_paginated(
                page, limit, search=search, category=category, status=club_status
            )
            member_counts = await self.uow.memberships.count_approved_by_club_ids(
                [club.id for club in clubs]
            )

            return Return.ok(
                ClubListResponse(
                    clubs=[
                        ClubInfo.from_entity(club, member_counts.get(club.id, 0))
                        for club in clubs
                    ],
                    pagination=Pagination.build(page, limit, total),
                )
            )


class ListCategoriesUseCase:
    """Distinct categories across all clubs."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[CategoriesResponse]:
        async with self.uow:
            categories = await self.uow.clubs.list_categories()
            return Return.ok(CategoriesResponse(categories=categories))
