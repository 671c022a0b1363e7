"""
User Administration API Routes (admin only)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from club_service.api.error import raise_for_error
from club_service.api.utils.ids import parse_uuid
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.app.use_cases.users import (
    ChangeRoleCommand,
    ChangeRoleResponse,
    ChangeRoleUseCase,
    ListUsersUseCase,
    ToggleStatusResponse,
    ToggleUserStatusUseCase,
    UserListResponse,
)
from club_service.depends import get_unit_of_work, require_roles
from club_service.domain.entities import UserRole

router = APIRouter(prefix="/users", tags=["Users"])

require_admin = require_roles(UserRole.admin)


@router.get("", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    search: Optional[str] = Query(None),
    role: Optional[str] = Query(None),
    actor: Actor = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListUsersUseCase(uow).execute(page, limit, search=search, role=role)

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


@router.patch(
    "/{user_id}/role", status_code=status.HTTP_200_OK, response_model=ChangeRoleResponse
)
async def change_role(
    user_id: str,
    request: ChangeRoleCommand,
    actor: Actor = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change a user's role. Assigning CLUB_LEADER requires club_id and makes
    the user that club's leader.

    Raises:
        - 400 Bad Request: Invalid ID or role, missing club_id, own role,
          demoting a leader who still leads a club
        - 404 Not Found: User or club not found
        - 409 Conflict: User already leads another club
    """
    club_id = parse_uuid(request.club_id, "club") if request.club_id else None
    result = await ChangeRoleUseCase(uow).execute(
        actor, parse_uuid(user_id, "user"), request.role, club_id
    )

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
                "CLUB_NOT_FOUND": status.HTTP_404_NOT_FOUND,
                "CLUB_ID_REQUIRED": status.HTTP_400_BAD_REQUEST,
                "CANNOT_CHANGE_OWN_ROLE": status.HTTP_400_BAD_REQUEST,
                "LEADER_HAS_CLUB": status.HTTP_400_BAD_REQUEST,
                "ALREADY_LEADS_CLUB": status.HTTP_409_CONFLICT,
            },
        )

    return result.value


@router.patch(
    "/{user_id}/toggle-status",
    status_code=status.HTTP_200_OK,
    response_model=ToggleStatusResponse,
)
async def toggle_status(
    user_id: str,
    actor: Actor = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ToggleUserStatusUseCase(uow).execute(
        actor, parse_uuid(user_id, "user")
    )

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
                "CANNOT_DEACTIVATE_SELF": status.HTTP_400_BAD_REQUEST,
            },
        )

    return result.value
