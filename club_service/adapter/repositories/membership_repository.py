from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from club_service.app.repositories.membership_repository import IMembershipRepository
from club_service.domain.base import utcnow
from club_service.domain.entities import Membership, MembershipStatus


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        stmt = select(Membership).where(Membership.id == membership_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_and_club(
        self, user_id: UUID, club_id: UUID
    ) -> Optional[Membership]:
        """Get the unique membership of a user in a club"""
        stmt = select(Membership).where(
            Membership.user_id == user_id, Membership.club_id == club_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get all memberships for a user, newest first"""
        stmt = (
            select(Membership)
            .where(Membership.user_id == user_id)
            .order_by(Membership.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_club_id(
        self, club_id: UUID, status: Optional[MembershipStatus] = None
    ) -> List[Membership]:
        """Get memberships of a club, optionally filtered by status"""
        stmt = select(Membership).where(Membership.club_id == club_id)
        if status is not None:
            stmt = stmt.where(Membership.status == status)
        stmt = stmt.order_by(Membership.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def update_status(
        self, membership: Membership, status: MembershipStatus
    ) -> Membership:
        membership.status = status
        membership.joined_at = utcnow() if status == MembershipStatus.approved else None
        return await self.update(membership)

    async def delete(self, membership: Membership) -> None:
        await self.session.delete(membership)
        await self.session.flush()

    async def delete_by_club_id(self, club_id: UUID) -> int:
        memberships = await self.get_by_club_id(club_id)
        for membership in memberships:
            await self.session.delete(membership)
        await self.session.flush()
        return len(memberships)

    async def count_by_club_and_status(
        self, club_id: UUID, status: MembershipStatus
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(Membership)
            .where(Membership.club_id == club_id, Membership.status == status)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def count_approved_by_club_ids(self, club_ids: List[UUID]) -> Dict[UUID, int]:
        if not club_ids:
            return {}
        stmt = (
            select(Membership.club_id, func.count())
            .where(
                col(Membership.club_id).in_(club_ids),
                Membership.status == MembershipStatus.approved,
            )
            .group_by(Membership.club_id)
        )
        result = await self.session.exec(stmt)
        counts = {club_id: count for club_id, count in result.all()}
        return {club_id: counts.get(club_id, 0) for club_id in club_ids}

    async def count_by_status(self, status: MembershipStatus) -> int:
        stmt = (
            select(func.count())
            .select_from(Membership)
            .where(Membership.status == status)
        )
        result = await self.session.exec(stmt)
        return result.one()
