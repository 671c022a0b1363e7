from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from club_service.domain.entities import User, UserRole


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: List[UUID]) -> List[User]:
        """Get several users at once"""
        pass

    @abstractmethod
    async def get_by_student_id(self, student_id: str) -> Optional[User]:
        """Get user by student ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def list_paginated(
        self,
        page: int,
        limit: int,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> Tuple[List[User], int]:
        """List users newest first, returns (page of users, total count)"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users"""
        pass
