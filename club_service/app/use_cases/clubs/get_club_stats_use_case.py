from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import MembershipStatus

from .dtos import ClubStatsResponse


class GetClubStatsUseCase:
    """Approved/pending/rejected counts for a club (leader-owner or admin)."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, club_id: UUID) -> Result[ClubStatsResponse]:
        async with self.uow:
            club = await self.uow.clubs.get_by_id(club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            denied = AuthorizationGuard.require_club_manager(actor, club)
            if denied is not None:
                return Return.err(denied)

            counts = {
                status: await self.uow.memberships.count_by_club_and_status(
                    club_id, status
                )
                for status in MembershipStatus
            }

            return Return.ok(
                ClubStatsResponse(
                    club_id=str(club_id),
                    approved=counts[MembershipStatus.approved],
                    pending=counts[MembershipStatus.pending],
                    rejected=counts[MembershipStatus.rejected],
                )
            )
