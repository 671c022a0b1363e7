"""
Membership Use Cases

Join/leave, approval and removal workflows for club memberships.
"""

from .check_membership_use_case import CheckMembershipUseCase
from .dtos import (
    CheckMembershipResponse,
    JoinClubResponse,
    LeaveClubResponse,
    MembershipClubInfo,
    MembershipInfo,
    MyMembershipItem,
    MyMembershipsResponse,
    RemoveMemberResponse,
    UpdateMembershipStatusResponse,
)
from .get_my_memberships_use_case import GetMyMembershipsUseCase
from .join_club_use_case import JoinClubUseCase
from .leave_club_use_case import LeaveClubUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .update_membership_status_use_case import UpdateMembershipStatusUseCase

__all__ = [
    "JoinClubUseCase",
    "UpdateMembershipStatusUseCase",
    "LeaveClubUseCase",
    "RemoveMemberUseCase",
    "GetMyMembershipsUseCase",
    "CheckMembershipUseCase",
    "MembershipInfo",
    "MembershipClubInfo",
    "MyMembershipItem",
    "JoinClubResponse",
    "UpdateMembershipStatusResponse",
    "LeaveClubResponse",
    "RemoveMemberResponse",
    "MyMembershipsResponse",
    "CheckMembershipResponse",
]
