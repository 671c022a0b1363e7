from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.unit_of_work import UnitOfWork

from .dtos import MarkAllReadResponse, NotificationInfo


class MarkNotificationReadUseCase:
    """
    Mark one notification as read.

    Business Rules:
    - Notification must exist (NOTIFICATION_NOT_FOUND)
    - Only its owner may mark it (FORBIDDEN)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, notification_id: UUID
    ) -> Result[NotificationInfo]:
        async with self.uow:
            notification = await self.uow.notifications.get_by_id(notification_id)
            if notification is None:
                return Return.err(
                    Error("NOTIFICATION_NOT_FOUND", "Notification not found")
                )

            denied = AuthorizationGuard.require_owner(actor, notification.user_id)
            if denied is not None:
                return Return.err(denied)

            notification.is_read = True
            notification = await self.uow.notifications.update(notification)
            await self.uow.commit()

            return Return.ok(NotificationInfo.from_entity(notification))


class MarkAllNotificationsReadUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor) -> Result[MarkAllReadResponse]:
        async with self.uow:
            updated = await self.uow.notifications.mark_all_read(actor.id)
            await self.uow.commit()
            return Return.ok(MarkAllReadResponse(status="ok", updated=updated))
