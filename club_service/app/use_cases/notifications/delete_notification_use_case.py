from uuid import UUID

from club_service.libs.result import Error, Result, Return
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteNotificationResponse


class DeleteNotificationUseCase:
    """Delete one of the caller's notifications (404 first, then 403)."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, notification_id: UUID
    ) -> Result[DeleteNotificationResponse]:
        async with self.uow:
            notification = await self.uow.notifications.get_by_id(notification_id)
            if notification is None:
                return Return.err(
                    Error("NOTIFICATION_NOT_FOUND", "Notification not found")
                )

            denied = AuthorizationGuard.require_owner(actor, notification.user_id)
            if denied is not None:
                return Return.err(denied)

            await self.uow.notifications.delete(notification)
            await self.uow.commit()

            return Return.ok(DeleteNotificationResponse(status="deleted"))
