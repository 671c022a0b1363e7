from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.unit_of_work import UnitOfWork

from .dtos import ClubInfo, UpdateClubCommand


class UpdateClubUseCase:
    """
    Use case for editing club details.

    Business Rules:
    - Club must exist (CLUB_NOT_FOUND), checked before permissions
    - Leader-owner or admin only (FORBIDDEN)
    - Renaming to another club's name fails (CLUB_NAME_EXISTS)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, club_id: UUID, command: UpdateClubCommand
    ) -> Result[ClubInfo]:
        async with self.uow:
            club = await self.uow.clubs.get_by_id(club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            denied = AuthorizationGuard.require_club_manager(actor, club)
            if denied is not None:
                return Return.err(denied)

            changes = command.model_dump(exclude_unset=True, exclude_none=True)

            if "name" in changes and changes["name"] != club.name:
                if await self.uow.clubs.get_by_name(changes["name"]) is not None:
                    return Return.err(
                        Error(
                            "CLUB_NAME_EXISTS", "A club with this name already exists"
                        )
                    )

            for field, value in changes.items():
                setattr(club, field, value)

            club = await self.uow.clubs.update(club)
            member_count = (
                await self.uow.memberships.count_approved_by_club_ids([club.id])
            ).get(club.id, 0)

            await self.uow.commit()

            return Return.ok(ClubInfo.from_entity(club, member_count=member_count))
