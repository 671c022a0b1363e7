from club_service.libs.result import Result, Return
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork

from .dtos import (
    MembershipClubInfo,
    MembershipInfo,
    MyMembershipItem,
    MyMembershipsResponse,
)


class GetMyMembershipsUseCase:
    """All memberships of the caller, newest first, with club summaries."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor) -> Result[MyMembershipsResponse]:
        async with self.uow:
            memberships = await self.uow.memberships.get_by_user_id(actor.id)

            club_ids = [m.club_id for m in memberships]
            clubs = {
                club.id: club for club in await self.uow.clubs.get_by_ids(club_ids)
            }
            member_counts = await self.uow.memberships.count_approved_by_club_ids(
                club_ids
            )

            items = []
            for membership in memberships:
                club = clubs.get(membership.club_id)
                items.append(
                    MyMembershipItem(
                        membership=MembershipInfo.from_entity(membership),
                        club=(
                            MembershipClubInfo.from_entity(
                                club, member_counts.get(club.id, 0)
                            )
                            if club is not None
                            else None
                        ),
                    )
                )

            return Return.ok(MyMembershipsResponse(memberships=items))
