"""
Club Management Use Cases

Club directory and club lifecycle business logic.
"""

from .create_club_use_case import CreateClubUseCase
from .delete_club_use_case import DeleteClubUseCase
from .dtos import (
    CategoriesResponse,
    ClubInfo,
    ClubListResponse,
    ClubMemberInfo,
    ClubMembersResponse,
    ClubStatsResponse,
    CreateClubCommand,
    DeleteClubResponse,
    LeaderInfo,
    Pagination,
    UpdateClubCommand,
)
from .get_club_stats_use_case import GetClubStatsUseCase
from .get_club_use_case import GetClubUseCase
from .list_club_members_use_case import ListClubMembersUseCase
from .list_clubs_use_case import ListCategoriesUseCase, ListClubsUseCase
from .update_club_status_use_case import UpdateClubStatusUseCase
from .update_club_use_case import UpdateClubUseCase

__all__ = [
    "CreateClubUseCase",
    "UpdateClubUseCase",
    "UpdateClubStatusUseCase",
    "DeleteClubUseCase",
    "GetClubUseCase",
    "ListClubsUseCase",
    "ListCategoriesUseCase",
    "ListClubMembersUseCase",
    "GetClubStatsUseCase",
    "CreateClubCommand",
    "UpdateClubCommand",
    "ClubInfo",
    "LeaderInfo",
    "Pagination",
    "ClubListResponse",
    "CategoriesResponse",
    "DeleteClubResponse",
    "ClubMemberInfo",
    "ClubMembersResponse",
    "ClubStatsResponse",
]
