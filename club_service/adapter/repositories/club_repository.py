from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from club_service.app.repositories.club_repository import IClubRepository
from club_service.domain.entities import Club, ClubStatus


class ClubRepository(IClubRepository):
    """Club repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, club_id: UUID) -> Optional[Club]:
        """Get club by ID"""
        stmt = select(Club).where(Club.id == club_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, name: str) -> Optional[Club]:
        """Get club by unique name"""
        stmt = select(Club).where(Club.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_leader_id(self, leader_id: UUID) -> List[Club]:
        """Get clubs led by a user"""
        stmt = select(Club).where(Club.leader_id == leader_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_ids(self, club_ids: List[UUID]) -> List[Club]:
        if not club_ids:
            return []
        stmt = select(Club).where(col(Club.id).in_(club_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_paginated(
        self,
        page: int,
        limit: int,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[ClubStatus] = None,
    ) -> Tuple[List[Club], int]:
        conditions = []
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(
                    col(Club.name).ilike(pattern),
                    col(Club.description).ilike(pattern),
                )
            )
        if category:
            conditions.append(Club.category == category)
        if status is not None:
            conditions.append(Club.status == status)

        stmt = (
            select(Club)
            .where(*conditions)
            .order_by(Club.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        clubs = list(result.all())

        count_stmt = select(func.count()).select_from(Club).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()
        return clubs, total

    async def list_categories(self) -> List[str]:
        stmt = select(Club.category).distinct().order_by(Club.category)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, club: Club) -> Club:
        """Create a new club"""
        self.session.add(club)
        await self.session.flush()
        await self.session.refresh(club)
        return club

    async def update(self, club: Club) -> Club:
        """Update existing club"""
        self.session.add(club)
        await self.session.flush()
        await self.session.refresh(club)
        return club

    async def delete(self, club: Club) -> None:
        await self.session.delete(club)
        await self.session.flush()

    async def count(self, status: Optional[ClubStatus] = None) -> int:
        stmt = select(func.count()).select_from(Club)
        if status is not None:
            stmt = stmt.where(Club.status == status)
        result = await self.session.exec(stmt)
        return result.one()
