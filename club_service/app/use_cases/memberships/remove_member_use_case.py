"""
Remove Member from Club Use Case

Handles a leader or admin removing a membership.
"""

import logging
from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.notifier import MEMBERSHIP, Notifier
from club_service.app.services.unit_of_work import UnitOfWork

from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing members from a club.

    Business Rules:
    - Membership must exist (MEMBERSHIP_NOT_FOUND), checked before permissions
    - Only the club's leader-owner or an admin can remove members (FORBIDDEN)
    - The club leader can never be removed, even by an admin (CANNOT_REMOVE_LEADER)
    - The row is hard-deleted and the removed user is notified (best effort)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, membership_id: UUID
    ) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            actor: Leader or admin performing the removal
            membership_id: Membership to remove

        Returns:
            Result with RemoveMemberResponse DTO, or Error
        """
        async with self.uow:
            membership = await self.uow.memberships.get_by_id(membership_id)
            if membership is None:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "Membership not found")
                )

            club = await self.uow.clubs.get_by_id(membership.club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            denied = AuthorizationGuard.require_club_manager(actor, club)
            if denied is not None:
                return Return.err(denied)

            if membership.user_id == club.leader_id:
                return Return.err(
                    Error("CANNOT_REMOVE_LEADER", "Cannot remove the club leader")
                )

            removed_user_id = membership.user_id
            await self.uow.memberships.delete(membership)
            await self.uow.commit()
            logger.info(
                f"User {removed_user_id} removed from club {club.id} by user {actor.id}"
            )

            response = RemoveMemberResponse(
                status="removed", message="Member removed successfully"
            )

            await Notifier(self.uow).enqueue(
                user_id=removed_user_id,
                title="Removed from Club",
                message=f'You have been removed from "{club.name}"',
                type=MEMBERSHIP,
            )

            return Return.ok(response)
