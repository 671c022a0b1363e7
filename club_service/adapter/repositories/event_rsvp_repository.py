from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from club_service.app.repositories.event_rsvp_repository import IEventRsvpRepository
from club_service.domain.entities import Event, EventRsvp, RsvpStatus


class EventRsvpRepository(IEventRsvpRepository):
    """Event RSVP repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_event(
        self, user_id: UUID, event_id: UUID
    ) -> Optional[EventRsvp]:
        stmt = select(EventRsvp).where(
            EventRsvp.user_id == user_id, EventRsvp.event_id == event_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_event_id(self, event_id: UUID) -> List[EventRsvp]:
        stmt = (
            select(EventRsvp)
            .where(EventRsvp.event_id == event_id)
            .order_by(EventRsvp.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_user_id(self, user_id: UUID) -> List[EventRsvp]:
        stmt = (
            select(EventRsvp)
            .join(Event, Event.id == EventRsvp.event_id)
            .where(EventRsvp.user_id == user_id)
            .order_by(col(Event.date).asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, rsvp: EventRsvp) -> EventRsvp:
        """Create a new RSVP"""
        self.session.add(rsvp)
        await self.session.flush()
        await self.session.refresh(rsvp)
        return rsvp

    async def update(self, rsvp: EventRsvp) -> EventRsvp:
        """Update existing RSVP"""
        self.session.add(rsvp)
        await self.session.flush()
        await self.session.refresh(rsvp)
        return rsvp

    async def count_by_event_and_status(
        self, event_id: UUID, status: RsvpStatus
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(EventRsvp)
            .where(EventRsvp.event_id == event_id, EventRsvp.status == status)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def count_going_by_event_ids(self, event_ids: List[UUID]) -> Dict[UUID, int]:
        if not event_ids:
            return {}
        stmt = (
            select(EventRsvp.event_id, func.count())
            .where(
                col(EventRsvp.event_id).in_(event_ids),
                EventRsvp.status == RsvpStatus.going,
            )
            .group_by(EventRsvp.event_id)
        )
        result = await self.session.exec(stmt)
        counts = {event_id: count for event_id, count in result.all()}
        return {event_id: counts.get(event_id, 0) for event_id in event_ids}

    async def delete_by_event_id(self, event_id: UUID) -> int:
        rsvps = await self.get_by_event_id(event_id)
        for rsvp in rsvps:
            await self.session.delete(rsvp)
        await self.session.flush()
        return len(rsvps)

    async def delete_by_club_id(self, club_id: UUID) -> int:
        stmt = (
            select(EventRsvp)
            .join(Event, Event.id == EventRsvp.event_id)
            .where(Event.club_id == club_id)
        )
        rsvps = list((await self.session.exec(stmt)).all())
        for rsvp in rsvps:
            await self.session.delete(rsvp)
        await self.session.flush()
        return len(rsvps)
