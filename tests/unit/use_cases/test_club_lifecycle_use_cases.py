from uuid import uuid4

import pytest

from club_service.app.use_cases.clubs import (
    CreateClubCommand,
    CreateClubUseCase,
    DeleteClubUseCase,
    UpdateClubCommand,
    UpdateClubStatusUseCase,
    UpdateClubUseCase,
)
from club_service.domain.entities import ClubStatus, MembershipStatus, UserRole
from tests.fixtures.factories import make_actor, make_club, make_user


def _command(**overrides):
    fields = dict(
        name="Robotics Society",
        description="Build and program robots together",
        category="Technology",
    )
    fields.update(overrides)
    return CreateClubCommand(**fields)


@pytest.mark.asyncio
async def test_member_creating_club_becomes_leader(mock_uow):
    user = make_user()
    actor = make_actor(UserRole.member, user_id=user.id)
    mock_uow.users.get_by_id.return_value = user

    result = await CreateClubUseCase(mock_uow).execute(actor, _command())

    assert result.is_ok()
    club = mock_uow.clubs.create.call_args.args[0]
    assert club.leader_id == user.id
    assert user.role == UserRole.club_leader
    assert user.club_id == club.id

    membership = mock_uow.memberships.create.call_args.args[0]
    assert membership.status == MembershipStatus.approved
    assert membership.joined_at is not None
    assert result.value.member_count == 1
    assert result.value.leader.id == str(user.id)


@pytest.mark.asyncio
async def test_admin_creating_club_keeps_admin_role(mock_uow):
    user = make_user(role=UserRole.admin)
    mock_uow.users.get_by_id.return_value = user

    result = await CreateClubUseCase(mock_uow).execute(
        make_actor(UserRole.admin, user_id=user.id), _command()
    )

    assert result.is_ok()
    assert user.role == UserRole.admin
    assert user.club_id is None
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_create_club_with_taken_name(mock_uow):
    mock_uow.clubs.get_by_name.return_value = make_club(name="Robotics Society")

    result = await CreateClubUseCase(mock_uow).execute(make_actor(), _command())

    assert result.is_err()
    assert result.error.code == "CLUB_NAME_EXISTS"
    mock_uow.clubs.create.assert_not_called()


@pytest.mark.asyncio
async def test_leader_cannot_create_second_club(mock_uow):
    actor = make_actor(UserRole.club_leader, club_id=uuid4())

    result = await CreateClubUseCase(mock_uow).execute(actor, _command())

    assert result.is_err()
    assert result.error.code == "ALREADY_LEADS_CLUB"


@pytest.mark.asyncio
async def test_update_club_applies_only_sent_fields(mock_uow):
    club = make_club()
    leader = make_actor(UserRole.club_leader, club_id=club.id, user_id=club.leader_id)
    mock_uow.clubs.get_by_id.return_value = club

    result = await UpdateClubUseCase(mock_uow).execute(
        leader, club.id, UpdateClubCommand(location="Room 101")
    )

    assert result.is_ok()
    assert club.location == "Room 101"
    assert club.name == "Chess Club"
    mock_uow.clubs.get_by_name.assert_not_called()


@pytest.mark.asyncio
async def test_update_club_rename_conflict(mock_uow):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club
    mock_uow.clubs.get_by_name.return_value = make_club(name="Go Club")

    result = await UpdateClubUseCase(mock_uow).execute(
        make_actor(UserRole.admin), club.id, UpdateClubCommand(name="Go Club")
    )

    assert result.is_err()
    assert result.error.code == "CLUB_NAME_EXISTS"
    assert club.name == "Chess Club"


@pytest.mark.asyncio
async def test_update_other_leaders_club_is_forbidden(mock_uow):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club

    result = await UpdateClubUseCase(mock_uow).execute(
        make_actor(UserRole.club_leader, club_id=uuid4()),
        club.id,
        UpdateClubCommand(name="Hijacked"),
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.clubs.update.assert_not_called()


@pytest.mark.asyncio
async def test_admin_suspends_club_and_leader_is_notified(mock_uow):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club

    result = await UpdateClubStatusUseCase(mock_uow).execute(
        make_actor(UserRole.admin), club.id, "SUSPENDED"
    )

    assert result.is_ok()
    assert club.status == ClubStatus.suspended
    assert mock_uow.notifications.create.call_args.args[0].user_id == club.leader_id


@pytest.mark.asyncio
async def test_leader_cannot_change_club_status(mock_uow):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club

    result = await UpdateClubStatusUseCase(mock_uow).execute(
        make_actor(UserRole.club_leader, club_id=club.id), club.id, "INACTIVE"
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    assert club.status == ClubStatus.active


@pytest.mark.asyncio
async def test_invalid_club_status(mock_uow):
    result = await UpdateClubStatusUseCase(mock_uow).execute(
        make_actor(UserRole.admin), uuid4(), "CLOSED"
    )

    assert result.is_err()
    assert result.error.code == "INVALID_STATUS"


@pytest.mark.asyncio
async def test_delete_club_cascades_and_demotes_leader(mock_uow):
    club = make_club()
    leader = make_user(id=club.leader_id, role=UserRole.club_leader, club_id=club.id)
    mock_uow.clubs.get_by_id.return_value = club
    mock_uow.users.get_by_id.return_value = leader
    mock_uow.memberships.delete_by_club_id.return_value = 3
    mock_uow.events.delete_by_club_id.return_value = 2
    mock_uow.announcements.delete_by_club_id.return_value = 4

    result = await DeleteClubUseCase(mock_uow).execute(make_actor(UserRole.admin), club.id)

    assert result.is_ok()
    assert result.value.memberships_removed == 3
    assert result.value.events_removed == 2
    assert result.value.announcements_removed == 4
    assert leader.role == UserRole.member
    assert leader.club_id is None
    mock_uow.memberships.delete_by_club_id.assert_called_once_with(club.id)
    mock_uow.rsvps.delete_by_club_id.assert_called_once_with(club.id)
    mock_uow.events.delete_by_club_id.assert_called_once_with(club.id)
    mock_uow.announcements.delete_by_club_id.assert_called_once_with(club.id)
    mock_uow.clubs.delete.assert_called_once_with(club)


@pytest.mark.asyncio
async def test_delete_unknown_club_before_permission_check(mock_uow):
    result = await DeleteClubUseCase(mock_uow).execute(make_actor(), uuid4())

    assert result.is_err()
    assert result.error.code == "CLUB_NOT_FOUND"


@pytest.mark.asyncio
async def test_leader_cannot_delete_own_club(mock_uow):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club

    result = await DeleteClubUseCase(mock_uow).execute(
        make_actor(UserRole.club_leader, club_id=club.id), club.id
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.clubs.delete.assert_not_called()
