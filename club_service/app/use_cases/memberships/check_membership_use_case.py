from uuid import UUID

from club_service.libs.result import Result, Return
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import MembershipStatus

from .dtos import CheckMembershipResponse


class CheckMembershipUseCase:
    """
    Membership status of the caller in a club.

    Never fails: an unknown club simply reports no membership.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, club_id: UUID
    ) -> Result[CheckMembershipResponse]:
        async with self.uow:
            membership = await self.uow.memberships.get_by_user_and_club(actor.id, club_id)

            if membership is None:
                return Return.ok(CheckMembershipResponse(is_member=False, status=None))

            return Return.ok(
                CheckMembershipResponse(
                    is_member=membership.status == MembershipStatus.approved,
                    status=membership.status.value,
                )
            )
