"""
Change User Role Use Case

Handles role changes and club leadership assignment.
"""

import logging
from typing import Optional
from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.notifier import SYSTEM, Notifier
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.base import utcnow
from club_service.domain.entities import Membership, MembershipStatus, UserRole

from ..auth.dtos import UserInfo
from .dtos import ChangeRoleResponse

logger = logging.getLogger(__name__)


class ChangeRoleUseCase:
    """
    Use case for changing a user's role (admin only).

    Business Rules:
    - Role must be ADMIN, CLUB_LEADER or MEMBER (INVALID_ROLE)
    - Target user must exist (USER_NOT_FOUND), checked before permissions
    - Admins cannot change their own role (CANNOT_CHANGE_OWN_ROLE)
    - CLUB_LEADER needs a club_id (CLUB_ID_REQUIRED) of an existing club
      (CLUB_NOT_FOUND). The target becomes that club's leader with an
      APPROVED membership; the previous leader loses the affiliation and,
      if a CLUB_LEADER, is demoted to MEMBER
    - A user leading a different club cannot be assigned another one
      (ALREADY_LEADS_CLUB)
    - A club leader cannot be demoted to MEMBER while still recorded as
      leader of a club (LEADER_HAS_CLUB)
    - The target is notified (best effort)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        user_id: UUID,
        new_role: str,
        club_id: Optional[UUID] = None,
    ) -> Result[ChangeRoleResponse]:
        try:
            role = UserRole(new_role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {new_role}. Must be one of: ADMIN, CLUB_LEADER, MEMBER",
                )
            )

        if role == UserRole.club_leader and club_id is None:
            return Return.err(
                Error("CLUB_ID_REQUIRED", "club_id is required to assign a club leader")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            denied = AuthorizationGuard.require_role(actor, UserRole.admin)
            if denied is not None:
                return Return.err(denied)

            if user.id == actor.id:
                return Return.err(
                    Error("CANNOT_CHANGE_OWN_ROLE", "You cannot change your own role")
                )

            if role == UserRole.club_leader:
                club = await self.uow.clubs.get_by_id(club_id)
                if club is None:
                    return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

                led_elsewhere = [
                    c
                    for c in await self.uow.clubs.get_by_leader_id(user.id)
                    if c.id != club.id
                ]
                if led_elsewhere:
                    return Return.err(
                        Error("ALREADY_LEADS_CLUB", "User already leads another club")
                    )

                if club.leader_id != user.id:
                    previous = await self.uow.users.get_by_id(club.leader_id)
                    if previous is not None and previous.club_id == club.id:
                        previous.club_id = None
                        if previous.role == UserRole.club_leader:
                            previous.role = UserRole.member
                        await self.uow.users.update(previous)

                    club.leader_id = user.id
                    await self.uow.clubs.update(club)

                membership = await self.uow.memberships.get_by_user_and_club(
                    user.id, club.id
                )
                if membership is None:
                    await self.uow.memberships.create(
                        Membership(
                            user_id=user.id,
                            club_id=club.id,
                            status=MembershipStatus.approved,
                            joined_at=utcnow(),
                        )
                    )
                elif membership.status != MembershipStatus.approved:
                    await self.uow.memberships.update_status(
                        membership, MembershipStatus.approved
                    )

                user.club_id = club.id
            elif role == UserRole.member:
                if await self.uow.clubs.get_by_leader_id(user.id):
                    return Return.err(
                        Error(
                            "LEADER_HAS_CLUB",
                            "Assign a new leader to the club before demoting this user",
                        )
                    )
                user.club_id = None

            user.role = role
            user = await self.uow.users.update(user)
            await self.uow.commit()
            logger.info(f"User {user_id} role set to {role.value} by admin {actor.id}")

            response = ChangeRoleResponse(
                message="User role updated", user=UserInfo.from_entity(user)
            )

            await Notifier(self.uow).enqueue(
                user_id=user_id,
                title="Role Updated",
                message=f"Your role has been changed to {role.value.replace('_', ' ').lower()}",
                type=SYSTEM,
            )

            return Return.ok(response)
