from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from club_service.app.repositories.user_repository import IUserRepository
from club_service.domain.entities import User, UserRole


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, user_ids: List[UUID]) -> List[User]:
        if not user_ids:
            return []
        stmt = select(User).where(col(User.id).in_(user_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_student_id(self, student_id: str) -> Optional[User]:
        """Get user by student ID"""
        stmt = select(User).where(User.student_id == student_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def list_paginated(
        self,
        page: int,
        limit: int,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> Tuple[List[User], int]:
        conditions = []
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(
                    col(User.first_name).ilike(pattern),
                    col(User.last_name).ilike(pattern),
                    col(User.email).ilike(pattern),
                )
            )
        if role is not None:
            conditions.append(User.role == role)

        stmt = (
            select(User)
            .where(*conditions)
            .order_by(User.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        users = list(result.all())

        count_stmt = select(func.count()).select_from(User).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()
        return users, total

    async def count(self) -> int:
        stmt = select(func.count()).select_from(User)
        result = await self.session.exec(stmt)
        return result.one()
