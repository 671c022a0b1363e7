from club_service.libs.result import Result, Return
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork

from ..common import Pagination
from .dtos import NotificationInfo, NotificationListResponse


class ListNotificationsUseCase:
    """The caller's notifications, newest first, with their unread count."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, page: int = 1, limit: int = 20, unread_only: bool = False
    ) -> Result[NotificationListResponse]:
        async with self.uow:
            notifications, total = await self.uow.notifications.get_by_user_paginated(
                actor.id, page, limit, unread_only=unread_only
            )
            unread_count = await self.uow.notifications.count_unread(actor.id)

            return Return.ok(
                NotificationListResponse(
                    notifications=[
                        NotificationInfo.from_entity(n) for n in notifications
                    ],
                    unread_count=unread_count,
                    pagination=Pagination.build(page, limit, total),
                )
            )
