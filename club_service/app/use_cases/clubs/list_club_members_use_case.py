from typing import Optional
from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import MembershipStatus

from .dtos import ClubMemberInfo, ClubMembersResponse


class ListClubMembersUseCase:
    """
    Memberships of a club with member details.

    Business Rules:
    - Club must exist (CLUB_NOT_FOUND)
    - Leader-owner and admins may list any status (all by default)
    - Everyone else only sees APPROVED members; asking for another
      status is FORBIDDEN
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, club_id: UUID, status: Optional[str] = None
    ) -> Result[ClubMembersResponse]:
        try:
            membership_status = MembershipStatus(status) if status else None
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_STATUS",
                    "Status must be one of: PENDING, APPROVED, REJECTED",
                )
            )

        async with self.uow:
            club = await self.uow.clubs.get_by_id(club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            if not AuthorizationGuard.is_club_manager(actor, club):
                if membership_status not in (None, MembershipStatus.approved):
                    return Return.err(
                        Error(
                            "FORBIDDEN",
                            "Only club leaders can view membership requests",
                        )
                    )
                membership_status = MembershipStatus.approved

            memberships = await self.uow.memberships.get_by_club_id(
                club_id, status=membership_status
            )

            members = []
            for membership in memberships:
                user = await self.uow.users.get_by_id(membership.user_id)
                if user is None:
                    continue
                members.append(
                    ClubMemberInfo(
                        membership_id=str(membership.id),
                        user_id=str(user.id),
                        first_name=user.first_name,
                        last_name=user.last_name,
                        email=user.email,
                        status=membership.status.value,
                        joined_at=(
                            membership.joined_at.isoformat()
                            if membership.joined_at
                            else None
                        ),
                        created_at=membership.created_at.isoformat(),
                    )
                )

            return Return.ok(ClubMembersResponse(members=members))
