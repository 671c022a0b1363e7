"""
Notification side-channel.

Notifications are written after the triggering mutation has been
committed, in their own commit. Any failure while writing one is logged
with its traceback and rolled back; it never turns a successful workflow
call into a failure.
"""

import logging
from typing import Iterable, Optional
from uuid import UUID

from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import Notification

logger = logging.getLogger(__name__)

MEMBERSHIP = "membership"
CLUB = "club"
SYSTEM = "system"
EVENT = "event"
ANNOUNCEMENT = "announcement"


class Notifier:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def enqueue(
        self,
        user_id: UUID,
        title: str,
        message: str,
        type: str,
        link: Optional[str] = None,
    ) -> Optional[Notification]:
        try:
            notification = await self.uow.notifications.create(
                Notification(
                    user_id=user_id,
                    title=title,
                    message=message,
                    type=type,
                    link=link,
                )
            )
            await self.uow.commit()
            return notification
        except Exception:
            logger.exception(f"Failed to create notification for user {user_id}")
            await self.uow.rollback()
            return None

    async def enqueue_many(
        self,
        user_ids: Iterable[UUID],
        title: str,
        message: str,
        type: str,
        link: Optional[str] = None,
    ) -> int:
        """Same notification to several users in one commit. Returns count."""
        user_ids = list(user_ids)
        if not user_ids:
            return 0
        try:
            for user_id in user_ids:
                await self.uow.notifications.create(
                    Notification(
                        user_id=user_id,
                        title=title,
                        message=message,
                        type=type,
                        link=link,
                    )
                )
            await self.uow.commit()
            return len(user_ids)
        except Exception:
            logger.exception(f"Failed to fan out notification to {len(user_ids)} users")
            await self.uow.rollback()
            return 0
