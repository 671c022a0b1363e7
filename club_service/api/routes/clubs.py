"""
Club API Routes

Public club directory plus club management for leaders and admins.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from club_service.api.error import raise_for_error
from club_service.api.utils.ids import parse_uuid
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.app.use_cases.clubs import (
    CategoriesResponse,
    ClubInfo,
    ClubListResponse,
    ClubMembersResponse,
    ClubStatsResponse,
    CreateClubCommand,
    CreateClubUseCase,
    DeleteClubResponse,
    DeleteClubUseCase,
    GetClubStatsUseCase,
    GetClubUseCase,
    ListCategoriesUseCase,
    ListClubMembersUseCase,
    ListClubsUseCase,
    UpdateClubCommand,
    UpdateClubStatusUseCase,
    UpdateClubUseCase,
)
from club_service.depends import get_current_actor, get_unit_of_work

router = APIRouter(prefix="/clubs", tags=["Clubs"])

NOT_FOUND = status.HTTP_404_NOT_FOUND
CONFLICT = status.HTTP_409_CONFLICT


@router.get("", status_code=status.HTTP_200_OK, response_model=ClubListResponse)
async def list_clubs(
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    search: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    club_status: Optional[str] = Query(None, alias="status"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List clubs (ACTIVE only unless a status is given)."""
    result = await ListClubsUseCase(uow).execute(
        page, limit, search=search, category=category, status=club_status
    )

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


@router.get(
    "/categories", status_code=status.HTTP_200_OK, response_model=CategoriesResponse
)
async def list_categories(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListCategoriesUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


@router.get("/{club_id}", status_code=status.HTTP_200_OK, response_model=ClubInfo)
async def get_club(club_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetClubUseCase(uow).execute(parse_uuid(club_id, "club"))

    if result.is_err():
        raise_for_error(result.error, {"CLUB_NOT_FOUND": NOT_FOUND})

    return result.value


class CreateClubRequest(BaseModel):
    name: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=10)
    category: str = Field(..., min_length=1, max_length=50)
    meeting_day: Optional[str] = Field(None, max_length=20)
    meeting_time: Optional[str] = Field(None, max_length=20)
    location: Optional[str] = Field(None, max_length=255)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ClubInfo)
async def create_club(
    request: CreateClubRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a club; the caller becomes its leader.

    Raises:
        - 409 Conflict: Name already taken, or the caller already leads a club
    """
    command = CreateClubCommand(**request.model_dump())
    result = await CreateClubUseCase(uow).execute(actor, command)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "CLUB_NAME_EXISTS": CONFLICT,
                "ALREADY_LEADS_CLUB": CONFLICT,
                "USER_NOT_FOUND": NOT_FOUND,
            },
        )

    return result.value


class UpdateClubRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=100)
    description: Optional[str] = Field(None, min_length=10)
    category: Optional[str] = Field(None, min_length=1, max_length=50)
    meeting_day: Optional[str] = Field(None, max_length=20)
    meeting_time: Optional[str] = Field(None, max_length=20)
    location: Optional[str] = Field(None, max_length=255)


@router.put("/{club_id}", status_code=status.HTTP_200_OK, response_model=ClubInfo)
async def update_club(
    club_id: str,
    request: UpdateClubRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update club details (club leader-owner or admin). Omitted fields are kept.

    Raises:
        - 403 Forbidden: Not the leader of this club
        - 404 Not Found: CLUB_NOT_FOUND
        - 409 Conflict: Name already taken
    """
    command = UpdateClubCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateClubUseCase(uow).execute(
        actor, parse_uuid(club_id, "club"), command
    )

    if result.is_err():
        raise_for_error(
            result.error,
            {"CLUB_NOT_FOUND": NOT_FOUND, "CLUB_NAME_EXISTS": CONFLICT},
        )

    return result.value


class UpdateClubStatusRequest(BaseModel):
    status: str = Field(..., description="ACTIVE, INACTIVE or SUSPENDED")


@router.patch(
    "/{club_id}/status", status_code=status.HTTP_200_OK, response_model=ClubInfo
)
async def update_club_status(
    club_id: str,
    request: UpdateClubStatusRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateClubStatusUseCase(uow).execute(
        actor, parse_uuid(club_id, "club"), request.status
    )

    if result.is_err():
        raise_for_error(result.error, {"CLUB_NOT_FOUND": NOT_FOUND})

    return result.value


@router.delete(
    "/{club_id}", status_code=status.HTTP_200_OK, response_model=DeleteClubResponse
)
async def delete_club(
    club_id: str,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete a club and its memberships (admin only).

    Raises:
        - 403 Forbidden: Not an admin
        - 404 Not Found: CLUB_NOT_FOUND
    """
    result = await DeleteClubUseCase(uow).execute(actor, parse_uuid(club_id, "club"))

    if result.is_err():
        raise_for_error(result.error, {"CLUB_NOT_FOUND": NOT_FOUND})

    return result.value


@router.get(
    "/{club_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=ClubMembersResponse,
)
async def list_club_members(
    club_id: str,
    member_status: Optional[str] = Query(None, alias="status"),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListClubMembersUseCase(uow).execute(
        actor, parse_uuid(club_id, "club"), member_status
    )

    if result.is_err():
        raise_for_error(result.error, {"CLUB_NOT_FOUND": NOT_FOUND})

    return result.value


@router.get(
    "/{club_id}/stats", status_code=status.HTTP_200_OK, response_model=ClubStatsResponse
)
async def get_club_stats(
    club_id: str,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetClubStatsUseCase(uow).execute(actor, parse_uuid(club_id, "club"))

    if result.is_err():
        raise_for_error(result.error, {"CLUB_NOT_FOUND": NOT_FOUND})

    return result.value
