"""
Announcement API Routes

Public announcement feed; posting and removal for club leaders and admins.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from club_service.api.error import raise_for_error
from club_service.api.utils.ids import parse_uuid
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.app.use_cases.announcements import (
    AnnouncementInfo,
    AnnouncementListResponse,
    CreateAnnouncementCommand,
    CreateAnnouncementUseCase,
    DeleteAnnouncementResponse,
    DeleteAnnouncementUseCase,
    ListAnnouncementsUseCase,
)
from club_service.depends import get_current_actor, get_unit_of_work
from club_service.domain.entities import AnnouncementPriority

router = APIRouter(prefix="/announcements", tags=["Announcements"])

NOT_FOUND = status.HTTP_404_NOT_FOUND


@router.get(
    "", status_code=status.HTTP_200_OK, response_model=AnnouncementListResponse
)
async def list_announcements(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    club_id: Optional[str] = Query(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListAnnouncementsUseCase(uow).execute(
        page, limit, club_id=parse_uuid(club_id, "club") if club_id else None
    )

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


class CreateAnnouncementRequest(BaseModel):
    club_id: str
    title: str = Field(..., min_length=3, max_length=255)
    content: str = Field(..., min_length=10)
    priority: AnnouncementPriority = AnnouncementPriority.normal


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AnnouncementInfo)
async def create_announcement(
    request: CreateAnnouncementRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Post an announcement to a club (club leader-owner or admin).

    Raises:
        - 400 Bad Request: Invalid club ID
        - 403 Forbidden: Not the leader of this club
        - 404 Not Found: CLUB_NOT_FOUND
    """
    command = CreateAnnouncementCommand(
        club_id=parse_uuid(request.club_id, "club"),
        title=request.title,
        content=request.content,
        priority=request.priority,
    )
    result = await CreateAnnouncementUseCase(uow).execute(actor, command)

    if result.is_err():
        raise_for_error(result.error, {"CLUB_NOT_FOUND": NOT_FOUND})

    return result.value


@router.delete(
    "/{announcement_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteAnnouncementResponse,
)
async def delete_announcement(
    announcement_id: str,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteAnnouncementUseCase(uow).execute(
        actor, parse_uuid(announcement_id, "announcement")
    )

    if result.is_err():
        raise_for_error(
            result.error,
            {"ANNOUNCEMENT_NOT_FOUND": NOT_FOUND, "CLUB_NOT_FOUND": NOT_FOUND},
        )

    return result.value
