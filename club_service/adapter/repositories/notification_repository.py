from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from club_service.app.repositories.notification_repository import INotificationRepository
from club_service.domain.entities import Notification


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, notification_id: UUID) -> Optional[Notification]:
        """Get notification by ID"""
        stmt = select(Notification).where(Notification.id == notification_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def update(self, notification: Notification) -> Notification:
        """Update existing notification"""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def delete(self, notification: Notification) -> None:
        await self.session.delete(notification)
        await self.session.flush()

    async def get_by_user_paginated(
        self, user_id: UUID, page: int, limit: int, unread_only: bool = False
    ) -> Tuple[List[Notification], int]:
        conditions = [Notification.user_id == user_id]
        if unread_only:
            conditions.append(Notification.is_read == False)  # noqa: E712

        stmt = (
            select(Notification)
            .where(*conditions)
            .order_by(Notification.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        notifications = list(result.all())

        count_stmt = select(func.count()).select_from(Notification).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()
        return notifications, total

    async def count_unread(self, user_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(Notification)
            .where(
                Notification.user_id == user_id,
                Notification.is_read == False,  # noqa: E712
            )
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def mark_all_read(self, user_id: UUID) -> int:
        stmt = select(Notification).where(
            Notification.user_id == user_id,
            Notification.is_read == False,  # noqa: E712
        )
        result = await self.session.exec(stmt)
        unread = list(result.all())
        for notification in unread:
            notification.is_read = True
            self.session.add(notification)
        await self.session.flush()
        return len(unread)

    async def list_paginated(
        self, page: int, limit: int
    ) -> Tuple[List[Notification], int]:
        stmt = (
            select(Notification)
            .order_by(Notification.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        notifications = list(result.all())

        count_stmt = select(func.count()).select_from(Notification)
        total = (await self.session.exec(count_stmt)).one()
        return notifications, total
