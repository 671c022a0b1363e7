"""
Leave Club Use Case

A member withdraws from a club they belong to.
"""

import logging
from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import MembershipStatus

from .dtos import LeaveClubResponse

logger = logging.getLogger(__name__)


class LeaveClubUseCase:
    """
    Use case for leaving a club.

    Business Rules:
    - Club must exist (CLUB_NOT_FOUND)
    - The club's leader cannot leave their own club (LEADER_CANNOT_LEAVE)
    - Caller must hold an APPROVED membership (MEMBERSHIP_NOT_FOUND / NOT_A_MEMBER)
    - The row is deleted; no notification is sent
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, club_id: UUID) -> Result[LeaveClubResponse]:
        async with self.uow:
            club = await self.uow.clubs.get_by_id(club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            if club.leader_id == actor.id:
                return Return.err(
                    Error(
                        "LEADER_CANNOT_LEAVE",
                        "Club leaders cannot leave their own club",
                    )
                )

            membership = await self.uow.memberships.get_by_user_and_club(actor.id, club_id)
            if membership is None:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "You are not a member of this club")
                )

            if membership.status != MembershipStatus.approved:
                return Return.err(
                    Error("NOT_A_MEMBER", "Only approved members can leave a club")
                )

            await self.uow.memberships.delete(membership)
            await self.uow.commit()
            logger.info(f"User {actor.id} left club {club_id}")

            return Return.ok(
                LeaveClubResponse(status="left", message="You have left the club")
            )
