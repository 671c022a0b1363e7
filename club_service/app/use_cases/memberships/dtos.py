"""
Membership Use Case DTOs (Data Transfer Objects)

All Response classes for the membership domain.
"""

from typing import List, Optional

from pydantic import BaseModel

from club_service.domain.entities import Club, Membership


class MembershipInfo(BaseModel):
    """A membership row as returned to clients"""

    id: str
    user_id: str
    club_id: str
    status: str
    joined_at: Optional[str] = None
    created_at: str

    @classmethod
    def from_entity(cls, membership: Membership) -> "MembershipInfo":
        return cls(
            id=str(membership.id),
            user_id=str(membership.user_id),
            club_id=str(membership.club_id),
            status=membership.status.value,
            joined_at=membership.joined_at.isoformat() if membership.joined_at else None,
            created_at=membership.created_at.isoformat(),
        )


class JoinClubResponse(BaseModel):
    """Response for join club use case"""

    message: str
    created: bool
    membership: MembershipInfo


class UpdateMembershipStatusResponse(BaseModel):
    """Response for approve/reject use case"""

    message: str
    membership: MembershipInfo


class LeaveClubResponse(BaseModel):
    """Response for leave club use case"""

    status: str
    message: str


class RemoveMemberResponse(BaseModel):
    """Response for remove member use case"""

    status: str
    message: str


class MembershipClubInfo(BaseModel):
    """Club summary attached to a user's membership"""

    id: str
    name: str
    category: str
    status: str
    leader_id: str
    member_count: int

    @classmethod
    def from_entity(cls, club: Club, member_count: int) -> "MembershipClubInfo":
        return cls(
            id=str(club.id),
            name=club.name,
            category=club.category,
            status=club.status.value,
            leader_id=str(club.leader_id),
            member_count=member_count,
        )


class MyMembershipItem(BaseModel):
    """One entry of GET /memberships/my-memberships"""

    membership: MembershipInfo
    club: Optional[MembershipClubInfo] = None


class MyMembershipsResponse(BaseModel):
    """Response for my memberships use case"""

    memberships: List[MyMembershipItem]


class CheckMembershipResponse(BaseModel):
    """Response for check membership use case"""

    is_member: bool
    status: Optional[str] = None
