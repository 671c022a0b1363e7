from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from club_service.domain.entities import Membership, MembershipStatus


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        pass

    @abstractmethod
    async def get_by_user_and_club(
        self, user_id: UUID, club_id: UUID
    ) -> Optional[Membership]:
        """Get the unique membership of a user in a club"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get all memberships for a user, newest first"""
        pass

    @abstractmethod
    async def get_by_club_id(
        self, club_id: UUID, status: Optional[MembershipStatus] = None
    ) -> List[Membership]:
        """Get memberships of a club, optionally filtered by status"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership (raises IntegrityError on duplicate pair)"""
        pass

    @abstractmethod
    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        pass

    @abstractmethod
    async def update_status(
        self, membership: Membership, status: MembershipStatus
    ) -> Membership:
        """Set status; joined_at is set to now on APPROVED and cleared otherwise"""
        pass

    @abstractmethod
    async def delete(self, membership: Membership) -> None:
        """Hard-delete a membership"""
        pass

    @abstractmethod
    async def delete_by_club_id(self, club_id: UUID) -> int:
        """Delete every membership of a club. Returns count deleted."""
        pass

    @abstractmethod
    async def count_by_club_and_status(
        self, club_id: UUID, status: MembershipStatus
    ) -> int:
        """Count memberships of a club in a given status"""
        pass

    @abstractmethod
    async def count_approved_by_club_ids(self, club_ids: List[UUID]) -> Dict[UUID, int]:
        """Approved member count for each of the given clubs"""
        pass

    @abstractmethod
    async def count_by_status(self, status: MembershipStatus) -> int:
        """Count memberships in a given status across all clubs"""
        pass
