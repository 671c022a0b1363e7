from uuid import uuid4

import pytest

from club_service.app.use_cases.notifications import (
    DeleteNotificationUseCase,
    MarkNotificationReadUseCase,
)
from club_service.domain.entities import Notification
from tests.fixtures.factories import make_actor


def _notification(user_id):
    return Notification(
        id=uuid4(),
        user_id=user_id,
        title="Membership Approved",
        message="Welcome",
        type="membership",
    )


@pytest.mark.asyncio
async def test_owner_marks_notification_read(mock_uow):
    actor = make_actor()
    notification = _notification(actor.id)
    mock_uow.notifications.get_by_id.return_value = notification

    result = await MarkNotificationReadUseCase(mock_uow).execute(actor, notification.id)

    assert result.is_ok()
    assert result.value.is_read is True
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_mark_read_unknown_notification(mock_uow):
    result = await MarkNotificationReadUseCase(mock_uow).execute(make_actor(), uuid4())

    assert result.is_err()
    assert result.error.code == "NOTIFICATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_mark_read_foreign_notification(mock_uow):
    notification = _notification(uuid4())
    mock_uow.notifications.get_by_id.return_value = notification

    result = await MarkNotificationReadUseCase(mock_uow).execute(
        make_actor(), notification.id
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    assert notification.is_read is False


@pytest.mark.asyncio
async def test_delete_foreign_notification(mock_uow):
    notification = _notification(uuid4())
    mock_uow.notifications.get_by_id.return_value = notification

    result = await DeleteNotificationUseCase(mock_uow).execute(
        make_actor(), notification.id
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.notifications.delete.assert_not_called()
