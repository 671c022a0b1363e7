from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.unit_of_work import UnitOfWork

from .dtos import ClubInfo


class GetClubUseCase:
    """Club details with leader and approved member count (public)."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, club_id: UUID) -> Result[ClubInfo]:
        async with self.uow:
            club = await self.uow.clubs.get_by_id(club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            leader = await self.uow.users.get_by_id(club.leader_id)
            member_counts = await self.uow.memberships.count_approved_by_club_ids(
                [club.id]
            )

            return Return.ok(
                ClubInfo.from_entity(
                    club, member_count=member_counts.get(club.id, 0), leader=leader
                )
            )
