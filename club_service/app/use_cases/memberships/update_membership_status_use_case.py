"""
Update Membership Status Use Case

Approval workflow: a club's leader (or an admin) approves or rejects
a membership request.
"""

import logging
from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.notifier import MEMBERSHIP, Notifier
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import MembershipStatus

from .dtos import MembershipInfo, UpdateMembershipStatusResponse

logger = logging.getLogger(__name__)

ALLOWED_STATUSES = (MembershipStatus.approved, MembershipStatus.rejected)


class UpdateMembershipStatusUseCase:
    """
    Use case for approving or rejecting a membership.

    Business Rules:
    - status must be APPROVED or REJECTED (INVALID_STATUS)
    - Membership must exist (MEMBERSHIP_NOT_FOUND), checked before permissions
    - Caller must be the club's leader-owner or an admin (FORBIDDEN)
    - APPROVED sets joined_at to now, REJECTED clears it
    - Prior status is not re-checked: approving an approved row resets joined_at
    - The member is notified of the outcome (best effort)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, membership_id: UUID, new_status: str
    ) -> Result[UpdateMembershipStatusResponse]:
        try:
            status = MembershipStatus(new_status)
        except ValueError:
            status = None
        if status not in ALLOWED_STATUSES:
            return Return.err(
                Error("INVALID_STATUS", "Status must be APPROVED or REJECTED")
            )

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

            membership = await self.uow.memberships.update_status(membership, status)
            await self.uow.commit()
            logger.info(
                f"Membership {membership_id} set to {status.value} by user {actor.id}"
            )

            outcome = status.value.lower()
            response = UpdateMembershipStatusResponse(
                message=f"Membership {outcome}",
                membership=MembershipInfo.from_entity(membership),
            )

            await Notifier(self.uow).enqueue(
                user_id=membership.user_id,
                title=f"Membership {outcome.capitalize()}",
                message=f'Your membership request to "{club.name}" has been {outcome}',
                type=MEMBERSHIP,
                link=f"/clubs/{club.id}",
            )

            return Return.ok(response)
