from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from club_service.app.repositories.announcement_repository import IAnnouncementRepository
from club_service.domain.entities import Announcement


class AnnouncementRepository(IAnnouncementRepository):
    """Announcement repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, announcement_id: UUID) -> Optional[Announcement]:
        """Get announcement by ID"""
        stmt = select(Announcement).where(Announcement.id == announcement_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_paginated(
        self, page: int, limit: int, club_id: Optional[UUID] = None
    ) -> Tuple[List[Announcement], int]:
        conditions = []
        if club_id is not None:
            conditions.append(Announcement.club_id == club_id)

        stmt = (
            select(Announcement)
            .where(*conditions)
            .order_by(Announcement.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        announcements = list(result.all())

        count_stmt = select(func.count()).select_from(Announcement).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()
        return announcements, total

    async def create(self, announcement: Announcement) -> Announcement:
        """Create a new announcement"""
        self.session.add(announcement)
        await self.session.flush()
        await self.session.refresh(announcement)
        return announcement

    async def delete(self, announcement: Announcement) -> None:
        await self.session.delete(announcement)
        await self.session.flush()

    async def delete_by_club_id(self, club_id: UUID) -> int:
        stmt = select(Announcement).where(Announcement.club_id == club_id)
        announcements = list((await self.session.exec(stmt)).all())
        for announcement in announcements:
            await self.session.delete(announcement)
        await self.session.flush()
        return len(announcements)
