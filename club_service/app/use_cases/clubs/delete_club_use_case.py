"""
Delete Club Use Case

Admin-only hard delete of a club and everything owned by it.
"""

import logging
from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import UserRole

from .dtos import DeleteClubResponse

logger = logging.getLogger(__name__)


class DeleteClubUseCase:
    """
    Use case for deleting a club.

    Business Logic:
    1. Validate club exists, then that the caller is an admin
    2. Delete all memberships, events (with their RSVPs) and announcements
       of the club
    3. Clear the leader's club affiliation; a CLUB_LEADER is demoted to MEMBER
    4. Delete the club
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, club_id: UUID) -> Result[DeleteClubResponse]:
        async with self.uow:
            club = await self.uow.clubs.get_by_id(club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            denied = AuthorizationGuard.require_role(actor, UserRole.admin)
            if denied is not None:
                return Return.err(denied)

            removed = await self.uow.memberships.delete_by_club_id(club_id)
            await self.uow.rsvps.delete_by_club_id(club_id)
            events_removed = await self.uow.events.delete_by_club_id(club_id)
            announcements_removed = await self.uow.announcements.delete_by_club_id(
                club_id
            )

            leader = await self.uow.users.get_by_id(club.leader_id)
            if leader is not None and leader.club_id == club_id:
                leader.club_id = None
                if leader.role == UserRole.club_leader:
                    leader.role = UserRole.member
                await self.uow.users.update(leader)

            await self.uow.clubs.delete(club)
            await self.uow.commit()
            logger.info(
                f"Club {club_id} deleted by user {actor.id} "
                f"({removed} memberships, {events_removed} events, "
                f"{announcements_removed} announcements removed)"
            )

            return Return.ok(
                DeleteClubResponse(
                    status="deleted",
                    memberships_removed=removed,
                    events_removed=events_removed,
                    announcements_removed=announcements_removed,
                )
            )
