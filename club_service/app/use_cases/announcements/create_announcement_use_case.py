"""
Create Announcement Use Case

A club's leader (or an admin) posts an announcement; approved members
are notified with a preview of its content.
"""

import logging

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.notifier import ANNOUNCEMENT, Notifier
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import Announcement, MembershipStatus

from .dtos import AnnouncementInfo, CreateAnnouncementCommand

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100


def preview(content: str) -> str:
    if len(content) <= PREVIEW_LENGTH:
        return content
    return content[:PREVIEW_LENGTH] + "..."


class CreateAnnouncementUseCase:
    """
    Use case for posting an announcement.

    Business Rules:
    - Club must exist (CLUB_NOT_FOUND), checked before permissions
    - Leader-owner or admin only (FORBIDDEN)
    - Every APPROVED member except the author is notified (best effort)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, command: CreateAnnouncementCommand
    ) -> Result[AnnouncementInfo]:
        async with self.uow:
            club = await self.uow.clubs.get_by_id(command.club_id)
            if club is None:
                return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

            denied = AuthorizationGuard.require_club_manager(actor, club)
            if denied is not None:
                return Return.err(denied)

            announcement = await self.uow.announcements.create(
                Announcement(
                    club_id=club.id,
                    author_id=actor.id,
                    title=command.title,
                    content=command.content,
                    priority=command.priority,
                )
            )
            author = await self.uow.users.get_by_id(actor.id)
            members = await self.uow.memberships.get_by_club_id(
                club.id, MembershipStatus.approved
            )

            await self.uow.commit()
            logger.info(
                f"Announcement {announcement.id} posted to club {club.id} by user {actor.id}"
            )

            response = AnnouncementInfo.from_entity(announcement, club=club, author=author)

            await Notifier(self.uow).enqueue_many(
                [m.user_id for m in members if m.user_id != actor.id],
                title=f"Announcement: {command.title}",
                message=preview(command.content),
                type=ANNOUNCEMENT,
                link=f"/clubs/{club.id}",
            )

            return Return.ok(response)
