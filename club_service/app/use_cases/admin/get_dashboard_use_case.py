from club_service.libs.result import Result, Return
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import ClubStatus, MembershipStatus

from ..auth.dtos import UserInfo
from .dtos import (
    ClubCounts,
    DashboardResponse,
    EventCounts,
    MembershipCounts,
    UserCounts,
)

RECENT_USERS_LIMIT = 5


class GetDashboardUseCase:
    """
    Admin overview counts.

    Callers are gated to ADMIN at the route.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[DashboardResponse]:
        async with self.uow:
            clubs = {status: await self.uow.clubs.count(status) for status in ClubStatus}
            memberships = {
                status: await self.uow.memberships.count_by_status(status)
                for status in MembershipStatus
            }
            recent_users, total_users = await self.uow.users.list_paginated(
                1, RECENT_USERS_LIMIT
            )

            return Return.ok(
                DashboardResponse(
                    users=UserCounts(total=total_users),
                    clubs=ClubCounts(
                        total=sum(clubs.values()),
                        active=clubs[ClubStatus.active],
                        inactive=clubs[ClubStatus.inactive],
                        suspended=clubs[ClubStatus.suspended],
                    ),
                    memberships=MembershipCounts(
                        approved=memberships[MembershipStatus.approved],
                        pending=memberships[MembershipStatus.pending],
                        rejected=memberships[MembershipStatus.rejected],
                    ),
                    events=EventCounts(
                        total=await self.uow.events.count(),
                        upcoming=await self.uow.events.count(upcoming=True),
                    ),
                    recent_users=[UserInfo.from_entity(u) for u in recent_users],
                )
            )
