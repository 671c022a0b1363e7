from club_service.libs.result import Result, Return
from club_service.app.services.unit_of_work import UnitOfWork

from ..common import Pagination
from .dtos import ActivityItem, ActivityLogResponse


class GetActivityLogUseCase:
    """
    Platform activity: every notification, newest first, with its recipient.

    Callers are gated to ADMIN at the route.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, page: int = 1, limit: int = 20) -> Result[ActivityLogResponse]:
        async with self.uow:
            notifications, total = await self.uow.notifications.list_paginated(
                page, limit
            )
            users = {
                user.id: user
                for user in await self.uow.users.get_by_ids(
                    list({n.user_id for n in notifications})
                )
            }

            activity = []
            for n in notifications:
                user = users.get(n.user_id)
                activity.append(
                    ActivityItem(
                        id=str(n.id),
                        user_id=str(n.user_id),
                        user_name=(
                            f"{user.first_name} {user.last_name}" if user else None
                        ),
                        title=n.title,
                        message=n.message,
                        type=n.type,
                        link=n.link,
                        is_read=n.is_read,
                        created_at=n.created_at.isoformat(),
                    )
                )

            return Return.ok(
                ActivityLogResponse(
                    activity=activity, pagination=Pagination.build(page, limit, total)
                )
            )
