from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from club_service.app.repositories.event_repository import IEventRepository
from club_service.domain.base import utcnow
from club_service.domain.entities import Event


class EventRepository(IEventRepository):
    """Event repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        stmt = select(Event).where(Event.id == event_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, event_ids: List[UUID]) -> List[Event]:
        if not event_ids:
            return []
        stmt = select(Event).where(col(Event.id).in_(event_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_paginated(
        self,
        page: int,
        limit: int,
        club_id: Optional[UUID] = None,
        upcoming: bool = False,
        search: Optional[str] = None,
    ) -> Tuple[List[Event], int]:
        conditions = []
        if club_id is not None:
            conditions.append(Event.club_id == club_id)
        if upcoming:
            conditions.append(col(Event.date) >= utcnow())
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(
                    col(Event.title).ilike(pattern),
                    col(Event.description).ilike(pattern),
                )
            )

        stmt = (
            select(Event)
            .where(*conditions)
            .order_by(col(Event.date).asc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        events = list(result.all())

        count_stmt = select(func.count()).select_from(Event).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()
        return events, total

    async def create(self, event: Event) -> Event:
        """Create a new event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def update(self, event: Event) -> Event:
        """Update existing event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def delete(self, event: Event) -> None:
        await self.session.delete(event)
        await self.session.flush()

    async def delete_by_club_id(self, club_id: UUID) -> int:
        stmt = select(Event).where(Event.club_id == club_id)
        events = list((await self.session.exec(stmt)).all())
        for event in events:
            await self.session.delete(event)
        await self.session.flush()
        return len(events)

    async def count(self, upcoming: bool = False) -> int:
        stmt = select(func.count()).select_from(Event)
        if upcoming:
            stmt = stmt.where(col(Event.date) >= utcnow())
        result = await self.session.exec(stmt)
        return result.one()
