from fastapi import APIRouter, Depends, Query, status

from club_service.api.error import raise_for_error
from club_service.api.utils.ids import parse_uuid
from club_service.app.services.authorization import Actor
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.app.use_cases.notifications import (
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkAllReadResponse,
    MarkNotificationReadUseCase,
    NotificationInfo,
    NotificationListResponse,
)
from club_service.depends import get_current_actor, get_unit_of_work

router = APIRouter(prefix="/notifications", tags=["Notifications"])

NOT_FOUND_CODES = {"NOTIFICATION_NOT_FOUND": status.HTTP_404_NOT_FOUND}


@router.get("", status_code=status.HTTP_200_OK, response_model=NotificationListResponse)
async def list_notifications(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    unread_only: bool = Query(False),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListNotificationsUseCase(uow).execute(
        actor, page, limit, unread_only=unread_only
    )

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


@router.patch(
    "/read-all", status_code=status.HTTP_200_OK, response_model=MarkAllReadResponse
)
async def mark_all_read(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkAllNotificationsReadUseCase(uow).execute(actor)

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


@router.patch(
    "/{notification_id}/read",
    status_code=status.HTTP_200_OK,
    response_model=NotificationInfo,
)
async def mark_read(
    notification_id: str,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 403 Forbidden: Notification belongs to another user
        - 404 Not Found: NOTIFICATION_NOT_FOUND
    """
    result = await MarkNotificationReadUseCase(uow).execute(
        actor, parse_uuid(notification_id, "notification")
    )

    if result.is_err():
        raise_for_error(result.error, NOT_FOUND_CODES)

    return result.value


@router.delete(
    "/{notification_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteNotificationResponse,
)
async def delete_notification(
    notification_id: str,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteNotificationUseCase(uow).execute(
        actor, parse_uuid(notification_id, "notification")
    )

    if result.is_err():
        raise_for_error(result.error, NOT_FOUND_CODES)

    return result.value
