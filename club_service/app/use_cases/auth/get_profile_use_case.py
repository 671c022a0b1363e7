from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import MembershipStatus

from .dtos import ProfileMembership, ProfileResponse, UserInfo


class GetProfileUseCase:
    """Current user with the clubs they are an approved member of."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(actor.id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            approved = [
                m
                for m in await self.uow.memberships.get_by_user_id(actor.id)
                if m.status == MembershipStatus.approved
            ]
            clubs = {
                club.id: club
                for club in await self.uow.clubs.get_by_ids(
                    [m.club_id for m in approved]
                )
            }

            memberships = [
                ProfileMembership(
                    club_id=str(m.club_id),
                    club_name=clubs[m.club_id].name,
                    category=clubs[m.club_id].category,
                    joined_at=m.joined_at.isoformat() if m.joined_at else None,
                )
                for m in approved
                if m.club_id in clubs
            ]

            return Return.ok(
                ProfileResponse(user=UserInfo.from_entity(user), memberships=memberships)
            )
