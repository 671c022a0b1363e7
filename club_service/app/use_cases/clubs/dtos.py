"""
Club Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the club domain.
"""

from typing import List, Optional

from pydantic import BaseModel

from club_service.domain.entities import Club, User

from ..common import Pagination


# ============================================================================
# Command DTOs
# ============================================================================


class CreateClubCommand(BaseModel):
    """Validated intent to create a club"""

    name: str
    description: str
    category: str
    meeting_day: Optional[str] = None
    meeting_time: Optional[str] = None
    location: Optional[str] = None


class UpdateClubCommand(BaseModel):
    """Partial club update - only fields that were sent are applied"""

    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    meeting_day: Optional[str] = None
    meeting_time: Optional[str] = None
    location: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class LeaderInfo(BaseModel):
    """Public information about a club leader"""

    id: str
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "LeaderInfo":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )


class ClubInfo(BaseModel):
    """A club as returned to clients"""

    id: str
    name: str
    description: str
    category: str
    status: str
    leader_id: str
    meeting_day: Optional[str] = None
    meeting_time: Optional[str] = None
    location: Optional[str] = None
    member_count: int = 0
    created_at: str
    leader: Optional[LeaderInfo] = None

    @classmethod
    def from_entity(
        cls, club: Club, member_count: int = 0, leader: Optional[User] = None
    ) -> "ClubInfo":
        return cls(
            id=str(club.id),
            name=club.name,
            description=club.description,
            category=club.category,
            status=club.status.value,
            leader_id=str(club.leader_id),
            meeting_day=club.meeting_day,
            meeting_time=club.meeting_time,
            location=club.location,
            member_count=member_count,
            created_at=club.created_at.isoformat(),
            leader=LeaderInfo.from_entity(leader) if leader is not None else None,
        )


class ClubListResponse(BaseModel):
    """Response for list clubs use case"""

    clubs: List[ClubInfo]
    pagination: Pagination


class CategoriesResponse(BaseModel):
    """Response for list categories use case"""

    categories: List[str]


class DeleteClubResponse(BaseModel):
    """Response for delete club use case"""

    status: str
    memberships_removed: int
    events_removed: int
    announcements_removed: int


class ClubMemberInfo(BaseModel):
    """One membership of a club with the member's details"""

    membership_id: str
    user_id: str
    first_name: str
    last_name: str
    email: str
    status: str
    joined_at: Optional[str] = None
    created_at: str


class ClubMembersResponse(BaseModel):
    """Response for list club members use case"""

    members: List[ClubMemberInfo]


class ClubStatsResponse(BaseModel):
    """Membership counts of a club, for leader dashboards"""

    club_id: str
    approved: int
    pending: int
    rejected: int
