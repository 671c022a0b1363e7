"""
Join Club Use Case

Creates a membership request, or re-opens a rejected one.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor
from club_service.app.services.notifier import MEMBERSHIP, Notifier
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import ClubStatus, Membership, MembershipStatus

from .dtos import JoinClubResponse, MembershipInfo

logger = logging.getLogger(__name__)


class JoinClubUseCase:
    """
    Use case for requesting membership of a club.

    Business Rules:
    - Club must exist (CLUB_NOT_FOUND) and be ACTIVE (CLUB_NOT_ACTIVE)
    - APPROVED row: ALREADY_MEMBER; PENDING row: REQUEST_PENDING
    - REJECTED row is moved back to PENDING instead of creating a new row
    - A concurrent duplicate insert loses on the unique index: REQUEST_PENDING
    - The club leader is notified (best effort)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, club_id: UUID) -> Result[JoinClubResponse]:
        """
        Execute join club use case.

        Args:
            actor: Authenticated user requesting membership
            club_id: Club to join

        Returns:
            Result with JoinClubResponse (created=False for a re-request), or Error
        """
        async with self.uow:
            club = await self.uow.clubs.get_by_id(club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            if club.status != ClubStatus.active:
                return Return.err(
                    Error(
                        "CLUB_NOT_ACTIVE",
                        "This club is not currently accepting members",
                    )
                )

            existing = await self.uow.memberships.get_by_user_and_club(actor.id, club_id)

            if existing is not None:
                if existing.status == MembershipStatus.approved:
                    return Return.err(
                        Error("ALREADY_MEMBER", "You are already a member of this club")
                    )
                if existing.status == MembershipStatus.pending:
                    return Return.err(
                        Error("REQUEST_PENDING", "Your membership request is pending")
                    )

                # Previously rejected: re-open the same row
                membership = await self.uow.memberships.update_status(
                    existing, MembershipStatus.pending
                )
                created = False
            else:
                try:
                    membership = await self.uow.memberships.create(
                        Membership(
                            user_id=actor.id,
                            club_id=club_id,
                            status=MembershipStatus.pending,
                        )
                    )
                except IntegrityError:
                    logger.info(
                        f"Concurrent join for user {actor.id} in club {club_id} lost the race"
                    )
                    return Return.err(
                        Error("REQUEST_PENDING", "Your membership request is pending")
                    )
                created = True

            await self.uow.commit()
            logger.info(
                f"Membership request {membership.id}: user {actor.id} -> club {club_id}"
            )

            response = JoinClubResponse(
                message="Membership request submitted",
                created=created,
                membership=MembershipInfo.from_entity(membership),
            )

            await Notifier(self.uow).enqueue(
                user_id=club.leader_id,
                title="New Membership Request",
                message=(
                    f'{actor.full_name} has requested to join your club "{club.name}"'
                ),
                type=MEMBERSHIP,
                link=f"/dashboard/clubs/{club_id}/members",
            )

            return Return.ok(response)
