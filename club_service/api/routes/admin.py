from fastapi import APIRouter, Depends, Query, status

from club_service.api.error import raise_for_error
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.app.use_cases.admin import (
    ActivityLogResponse,
    DashboardResponse,
    GetActivityLogUseCase,
    GetDashboardUseCase,
)
from club_service.depends import get_unit_of_work, require_roles
from club_service.domain.entities import UserRole

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get(
    "/dashboard",
    status_code=status.HTTP_200_OK,
    response_model=DashboardResponse,
    dependencies=[Depends(require_roles(UserRole.admin))],
)
async def dashboard(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Platform overview counts.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 403 Forbidden: Not an admin
    """
    result = await GetDashboardUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


@router.get(
    "/activity",
    status_code=status.HTTP_200_OK,
    response_model=ActivityLogResponse,
    dependencies=[Depends(require_roles(UserRole.admin))],
)
async def activity_log(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Every notification sent on the platform, newest first (admin only)."""
    result = await GetActivityLogUseCase(uow).execute(page, limit)

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value
