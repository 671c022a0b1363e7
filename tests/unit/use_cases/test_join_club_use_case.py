from unittest.mock import patch
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from club_service.app.use_cases.memberships import JoinClubUseCase
from club_service.domain.entities import ClubStatus, MembershipStatus
from tests.fixtures.factories import make_actor, make_club, make_membership


@pytest.mark.asyncio
async def test_join_creates_pending_membership(mock_uow):
    """First request for a club creates a PENDING row and notifies the leader"""
    # Arrange
    actor = make_actor()
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club

    # Act
    result = await JoinClubUseCase(mock_uow).execute(actor, club.id)

    # Assert
    assert result.is_ok()
    assert result.value.created is True
    assert result.value.membership.status == "PENDING"
    assert result.value.membership.joined_at is None
    mock_uow.memberships.create.assert_called_once()

    created = mock_uow.memberships.create.call_args.args[0]
    assert created.user_id == actor.id
    assert created.club_id == club.id

    notification = mock_uow.notifications.create.call_args.args[0]
    assert notification.user_id == club.leader_id
    assert notification.title == "New Membership Request"
    assert notification.link == f"/dashboard/clubs/{club.id}/members"
    assert mock_uow.commit.call_count == 2


@pytest.mark.asyncio
async def test_join_unknown_club(mock_uow):
    result = await JoinClubUseCase(mock_uow).execute(make_actor(), uuid4())

    assert result.is_err()
    assert result.error.code == "CLUB_NOT_FOUND"
    mock_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [ClubStatus.inactive, ClubStatus.suspended])
async def test_join_non_active_club(mock_uow, status):
    club = make_club(status=status)
    mock_uow.clubs.get_by_id.return_value = club

    result = await JoinClubUseCase(mock_uow).execute(make_actor(), club.id)

    assert result.is_err()
    assert result.error.code == "CLUB_NOT_ACTIVE"
    mock_uow.memberships.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_join_when_already_member(mock_uow):
    actor = make_actor()
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club
    mock_uow.memberships.get_by_user_and_club.return_value = make_membership(
        actor.id, club.id, MembershipStatus.approved
    )

    result = await JoinClubUseCase(mock_uow).execute(actor, club.id)

    assert result.is_err()
    assert result.error.code == "ALREADY_MEMBER"
    assert result.error.message == "You are already a member of this club"
    mock_uow.notifications.create.assert_not_called()


@pytest.mark.asyncio
async def test_join_when_request_pending(mock_uow):
    actor = make_actor()
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club
    mock_uow.memberships.get_by_user_and_club.return_value = make_membership(
        actor.id, club.id, MembershipStatus.pending
    )

    result = await JoinClubUseCase(mock_uow).execute(actor, club.id)

    assert result.is_err()
    assert result.error.code == "REQUEST_PENDING"
    assert result.error.message == "Your membership request is pending"
    mock_uow.memberships.create.assert_not_called()
    mock_uow.memberships.update_status.assert_not_called()


@pytest.mark.asyncio
async def test_rejoin_after_rejection_reuses_row(mock_uow):
    """A REJECTED row goes back to PENDING instead of a new row being inserted"""
    actor = make_actor()
    club = make_club()
    rejected = make_membership(actor.id, club.id, MembershipStatus.rejected)
    mock_uow.clubs.get_by_id.return_value = club
    mock_uow.memberships.get_by_user_and_club.return_value = rejected

    result = await JoinClubUseCase(mock_uow).execute(actor, club.id)

    assert result.is_ok()
    assert result.value.created is False
    assert result.value.membership.id == str(rejected.id)
    assert rejected.status == MembershipStatus.pending
    assert rejected.joined_at is None
    mock_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_join_loses_on_unique_index(mock_uow):
    """Second of two racing inserts surfaces as a pending-request conflict"""
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club
    mock_uow.memberships.create.side_effect = IntegrityError(
        "INSERT INTO memberships", {}, Exception("UNIQUE constraint failed")
    )

    result = await JoinClubUseCase(mock_uow).execute(make_actor(), club.id)

    assert result.is_err()
    assert result.error.code == "REQUEST_PENDING"
    mock_uow.commit.assert_not_called()
    mock_uow.notifications.create.assert_not_called()


@pytest.mark.asyncio
async def test_join_succeeds_when_notification_fails(mock_uow):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club
    mock_uow.notifications.create.side_effect = OperationalError(
        "INSERT INTO notifications", {}, Exception("database is locked")
    )

    with patch("club_service.app.services.notifier.logger") as logger:
        result = await JoinClubUseCase(mock_uow).execute(make_actor(), club.id)

    assert result.is_ok()
    assert result.value.created is True
    mock_uow.commit.assert_called_once()
    mock_uow.rollback.assert_called_once()
    logger.exception.assert_called_once()
