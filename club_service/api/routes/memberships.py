"""
Membership API Routes

Join, approval, leave and removal workflows.
"""

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from club_service.api.error import raise_for_error
from club_service.api.utils.ids import parse_uuid
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.app.use_cases.memberships import (
    CheckMembershipResponse,
    CheckMembershipUseCase,
    GetMyMembershipsUseCase,
    JoinClubResponse,
    JoinClubUseCase,
    LeaveClubResponse,
    LeaveClubUseCase,
    MyMembershipsResponse,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    UpdateMembershipStatusResponse,
    UpdateMembershipStatusUseCase,
)
from club_service.depends import get_current_actor, get_unit_of_work

router = APIRouter(prefix="/memberships", tags=["Memberships"])

NOT_FOUND = status.HTTP_404_NOT_FOUND
BAD_REQUEST = status.HTTP_400_BAD_REQUEST
CONFLICT = status.HTTP_409_CONFLICT


@router.post(
    "/join/{club_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=JoinClubResponse,
)
async def join_club(
    club_id: str,
    response: Response,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request membership of a club.

    Returns 201 for a new request and 200 when a rejected request is re-opened.

    Raises:
        - 400 Bad Request: Invalid ID, club not active
        - 404 Not Found: CLUB_NOT_FOUND
        - 409 Conflict: Already a member, or a request is pending
    """
    result = await JoinClubUseCase(uow).execute(actor, parse_uuid(club_id, "club"))

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "CLUB_NOT_FOUND": NOT_FOUND,
                "CLUB_NOT_ACTIVE": BAD_REQUEST,
                "ALREADY_MEMBER": CONFLICT,
                "REQUEST_PENDING": CONFLICT,
            },
        )

    if not result.value.created:
        response.status_code = status.HTTP_200_OK

    return result.value


class UpdateMembershipStatusRequest(BaseModel):
    status: str = Field(..., description="APPROVED or REJECTED")


@router.patch(
    "/{membership_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=UpdateMembershipStatusResponse,
)
async def update_membership_status(
    membership_id: str,
    request: UpdateMembershipStatusRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Approve or reject a membership (club leader-owner or admin).

    Raises:
        - 400 Bad Request: Invalid ID or status
        - 403 Forbidden: Not the leader of this club
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
    """
    result = await UpdateMembershipStatusUseCase(uow).execute(
        actor, parse_uuid(membership_id, "membership"), request.status
    )

    if result.is_err():
        raise_for_error(
            result.error,
            {"MEMBERSHIP_NOT_FOUND": NOT_FOUND, "CLUB_NOT_FOUND": NOT_FOUND},
        )

    return result.value


@router.delete(
    "/leave/{club_id}",
    status_code=status.HTTP_200_OK,
    response_model=LeaveClubResponse,
)
async def leave_club(
    club_id: str,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Leave a club the caller is an approved member of.

    Raises:
        - 400 Bad Request: Invalid ID, caller leads the club, not an approved member
        - 404 Not Found: Club or membership not found
    """
    result = await LeaveClubUseCase(uow).execute(actor, parse_uuid(club_id, "club"))

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "CLUB_NOT_FOUND": NOT_FOUND,
                "MEMBERSHIP_NOT_FOUND": NOT_FOUND,
                "LEADER_CANNOT_LEAVE": BAD_REQUEST,
                "NOT_A_MEMBER": BAD_REQUEST,
            },
        )

    return result.value


@router.delete(
    "/remove/{membership_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def remove_member(
    membership_id: str,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove a member from a club (club leader-owner or admin).

    Raises:
        - 400 Bad Request: Invalid ID, target is the club leader
        - 403 Forbidden: Not the leader of this club
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
    """
    result = await RemoveMemberUseCase(uow).execute(
        actor, parse_uuid(membership_id, "membership")
    )

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "MEMBERSHIP_NOT_FOUND": NOT_FOUND,
                "CLUB_NOT_FOUND": NOT_FOUND,
                "CANNOT_REMOVE_LEADER": BAD_REQUEST,
            },
        )

    return result.value


@router.get(
    "/my-memberships",
    status_code=status.HTTP_200_OK,
    response_model=MyMembershipsResponse,
)
async def my_memberships(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetMyMembershipsUseCase(uow).execute(actor)

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


@router.get(
    "/check/{club_id}",
    status_code=status.HTTP_200_OK,
    response_model=CheckMembershipResponse,
)
async def check_membership(
    club_id: str,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CheckMembershipUseCase(uow).execute(
        actor, parse_uuid(club_id, "club")
    )

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value
