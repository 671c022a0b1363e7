"""
Create Club Use Case

The creator becomes the leader of the new club.
"""

import logging

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.base import utcnow
from club_service.domain.entities import Club, Membership, MembershipStatus, UserRole

from .dtos import ClubInfo, CreateClubCommand

logger = logging.getLogger(__name__)


class CreateClubUseCase:
    """
    Use case for creating a club.

    Business Rules:
    - Club name must be unique (CLUB_NAME_EXISTS)
    - A leader already affiliated with a club cannot create another
      (ALREADY_LEADS_CLUB)
    - MEMBER creators are promoted to CLUB_LEADER
    - Non-admin creators get their club affiliation set to the new club
    - The creator gets an APPROVED membership in the new club
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, command: CreateClubCommand
    ) -> Result[ClubInfo]:
        async with self.uow:
            if actor.role == UserRole.club_leader and actor.club_id is not None:
                return Return.err(
                    Error("ALREADY_LEADS_CLUB", "You already lead a club")
                )

            if await self.uow.clubs.get_by_name(command.name) is not None:
                return Return.err(
                    Error("CLUB_NAME_EXISTS", "A club with this name already exists")
                )

            user = await self.uow.users.get_by_id(actor.id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            club = await self.uow.clubs.create(
                Club(
                    name=command.name,
                    description=command.description,
                    category=command.category,
                    meeting_day=command.meeting_day,
                    meeting_time=command.meeting_time,
                    location=command.location,
                    leader_id=actor.id,
                )
            )

            # Promote the creator and bind their club affiliation
            if user.role != UserRole.admin:
                user.role = UserRole.club_leader
                user.club_id = club.id
                await self.uow.users.update(user)

            await self.uow.memberships.create(
                Membership(
                    user_id=actor.id,
                    club_id=club.id,
                    status=MembershipStatus.approved,
                    joined_at=utcnow(),
                )
            )

            await self.uow.commit()
            logger.info(f"Club {club.id} created by user {actor.id}")

            return Return.ok(ClubInfo.from_entity(club, member_count=1, leader=user))
