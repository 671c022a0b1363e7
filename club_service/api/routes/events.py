"""
Event API Routes

Public event calendar; scheduling for club leaders and admins; RSVPs
for any authenticated user.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from club_service.api.error import raise_for_error
from club_service.api.utils.ids import parse_uuid
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.app.use_cases.events import (
    CreateEventCommand,
    CreateEventUseCase,
    DeleteEventResponse,
    DeleteEventUseCase,
    EventDetailResponse,
    EventInfo,
    EventListResponse,
    GetEventUseCase,
    GetMyRsvpsUseCase,
    ListEventsUseCase,
    MyRsvpsResponse,
    RsvpEventUseCase,
    RsvpResponse,
    UpdateEventCommand,
    UpdateEventUseCase,
)
from club_service.depends import get_current_actor, get_unit_of_work

router = APIRouter(prefix="/events", tags=["Events"])

NOT_FOUND = status.HTTP_404_NOT_FOUND
BAD_REQUEST = status.HTTP_400_BAD_REQUEST
CONFLICT = status.HTTP_409_CONFLICT


@router.get("", status_code=status.HTTP_200_OK, response_model=EventListResponse)
async def list_events(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    club_id: Optional[str] = Query(None),
    upcoming: bool = Query(False),
    search: Optional[str] = Query(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List events, soonest first."""
    result = await ListEventsUseCase(uow).execute(
        page,
        limit,
        club_id=parse_uuid(club_id, "club") if club_id else None,
        upcoming=upcoming,
        search=search,
    )

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


@router.get(
    "/user/rsvps", status_code=status.HTTP_200_OK, response_model=MyRsvpsResponse
)
async def my_rsvps(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetMyRsvpsUseCase(uow).execute(actor)

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


@router.get(
    "/{event_id}", status_code=status.HTTP_200_OK, response_model=EventDetailResponse
)
async def get_event(event_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetEventUseCase(uow).execute(parse_uuid(event_id, "event"))

    if result.is_err():
        raise_for_error(result.error, {"EVENT_NOT_FOUND": NOT_FOUND})

    return result.value


class CreateEventRequest(BaseModel):
    club_id: str
    title: str = Field(..., min_length=3, max_length=255)
    description: str = Field(..., min_length=10)
    date: datetime
    end_date: Optional[datetime] = None
    time: str = Field(..., min_length=1, max_length=50)
    location: str = Field(..., min_length=1, max_length=255)
    capacity: Optional[int] = Field(None, gt=0)
    is_public: bool = True


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EventInfo)
async def create_event(
    request: CreateEventRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Schedule an event for a club (club leader-owner or admin).

    Approved members of the club are notified.

    Raises:
        - 400 Bad Request: Invalid club ID, end date before start date
        - 403 Forbidden: Not the leader of this club
        - 404 Not Found: CLUB_NOT_FOUND
    """
    command = CreateEventCommand(
        **request.model_dump(exclude={"club_id"}),
        club_id=parse_uuid(request.club_id, "club"),
    )
    result = await CreateEventUseCase(uow).execute(actor, command)

    if result.is_err():
        raise_for_error(
            result.error,
            {"CLUB_NOT_FOUND": NOT_FOUND, "INVALID_DATE_RANGE": BAD_REQUEST},
        )

    return result.value


class UpdateEventRequest(BaseModel):
    title: Optional[str] = Field(None, min_length=3, max_length=255)
    description: Optional[str] = Field(None, min_length=10)
    date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    time: Optional[str] = Field(None, min_length=1, max_length=50)
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    capacity: Optional[int] = Field(None, gt=0)
    is_public: Optional[bool] = None


@router.put("/{event_id}", status_code=status.HTTP_200_OK, response_model=EventInfo)
async def update_event(
    event_id: str,
    request: UpdateEventRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update an event (leader-owner of its club or admin). Omitted fields are kept.

    Raises:
        - 400 Bad Request: Invalid ID, end date before start date
        - 403 Forbidden: Not the leader of this club
        - 404 Not Found: EVENT_NOT_FOUND
    """
    command = UpdateEventCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateEventUseCase(uow).execute(
        actor, parse_uuid(event_id, "event"), command
    )

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "EVENT_NOT_FOUND": NOT_FOUND,
                "CLUB_NOT_FOUND": NOT_FOUND,
                "INVALID_DATE_RANGE": BAD_REQUEST,
            },
        )

    return result.value


@router.delete(
    "/{event_id}", status_code=status.HTTP_200_OK, response_model=DeleteEventResponse
)
async def delete_event(
    event_id: str,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteEventUseCase(uow).execute(actor, parse_uuid(event_id, "event"))

    if result.is_err():
        raise_for_error(
            result.error, {"EVENT_NOT_FOUND": NOT_FOUND, "CLUB_NOT_FOUND": NOT_FOUND}
        )

    return result.value


class RsvpRequest(BaseModel):
    status: str = Field(..., description="GOING, MAYBE or NOT_GOING")


@router.post(
    "/{event_id}/rsvp", status_code=status.HTTP_200_OK, response_model=RsvpResponse
)
async def rsvp_event(
    event_id: str,
    request: RsvpRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Record or change the caller's RSVP.

    Raises:
        - 400 Bad Request: Invalid ID or status, event at full capacity
        - 404 Not Found: EVENT_NOT_FOUND
        - 409 Conflict: Concurrent RSVP from the same user
    """
    result = await RsvpEventUseCase(uow).execute(
        actor, parse_uuid(event_id, "event"), request.status
    )

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "EVENT_NOT_FOUND": NOT_FOUND,
                "EVENT_FULL": BAD_REQUEST,
                "RSVP_CONFLICT": CONFLICT,
            },
        )

    return result.value
