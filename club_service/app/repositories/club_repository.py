from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from club_service.domain.entities import Club, ClubStatus


class IClubRepository(ABC):
    """Club repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, club_id: UUID) -> Optional[Club]:
        """Get club by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Club]:
        """Get club by unique name"""
        pass

    @abstractmethod
    async def get_by_leader_id(self, leader_id: UUID) -> List[Club]:
        """Get clubs led by a user"""
        pass

    @abstractmethod
    async def get_by_ids(self, club_ids: List[UUID]) -> List[Club]:
        """Get several clubs at once"""
        pass

    @abstractmethod
    async def list_paginated(
        self,
        page: int,
        limit: int,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[ClubStatus] = None,
    ) -> Tuple[List[Club], int]:
        """List clubs newest first, returns (page of clubs, total count)"""
        pass

    @abstractmethod
    async def list_categories(self) -> List[str]:
        """Distinct club categories"""
        pass

    @abstractmethod
    async def create(self, club: Club) -> Club:
        """Create a new club"""
        pass

    @abstractmethod
    async def update(self, club: Club) -> Club:
        """Update existing club"""
        pass

    @abstractmethod
    async def delete(self, club: Club) -> None:
        """Hard-delete a club"""
        pass

    @abstractmethod
    async def count(self, status: Optional[ClubStatus] = None) -> int:
        """Count clubs, optionally by status"""
        pass
