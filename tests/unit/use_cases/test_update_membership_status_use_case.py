from uuid import uuid4

import pytest

from club_service.app.use_cases.memberships import UpdateMembershipStatusUseCase
from club_service.domain.entities import MembershipStatus, UserRole
from tests.fixtures.factories import make_actor, make_club, make_membership


def _leader_and_club():
    leader = make_actor(UserRole.club_leader)
    club = make_club(leader_id=leader.id)
    leader.club_id = club.id
    return leader, club


@pytest.mark.asyncio
async def test_leader_approves_pending_request(mock_uow):
    leader, club = _leader_and_club()
    membership = make_membership(uuid4(), club.id)
    mock_uow.memberships.get_by_id.return_value = membership
    mock_uow.clubs.get_by_id.return_value = club

    result = await UpdateMembershipStatusUseCase(mock_uow).execute(
        leader, membership.id, "APPROVED"
    )

    assert result.is_ok()
    assert membership.status == MembershipStatus.approved
    assert membership.joined_at is not None
    assert result.value.membership.joined_at is not None

    notification = mock_uow.notifications.create.call_args.args[0]
    assert notification.user_id == membership.user_id
    assert notification.title == "Membership Approved"
    assert notification.link == f"/clubs/{club.id}"


@pytest.mark.asyncio
async def test_admin_rejects_request_of_any_club(mock_uow):
    club = make_club()
    membership = make_membership(uuid4(), club.id)
    mock_uow.memberships.get_by_id.return_value = membership
    mock_uow.clubs.get_by_id.return_value = club

    result = await UpdateMembershipStatusUseCase(mock_uow).execute(
        make_actor(UserRole.admin), membership.id, "REJECTED"
    )

    assert result.is_ok()
    assert membership.status == MembershipStatus.rejected
    assert membership.joined_at is None
    assert mock_uow.notifications.create.call_args.args[0].title == "Membership Rejected"


@pytest.mark.asyncio
async def test_reapproving_resets_joined_at(mock_uow):
    leader, club = _leader_and_club()
    membership = make_membership(uuid4(), club.id, MembershipStatus.approved)
    first_joined = membership.joined_at
    mock_uow.memberships.get_by_id.return_value = membership
    mock_uow.clubs.get_by_id.return_value = club

    result = await UpdateMembershipStatusUseCase(mock_uow).execute(
        leader, membership.id, "APPROVED"
    )

    assert result.is_ok()
    mock_uow.memberships.update_status.assert_called_once_with(
        membership, MembershipStatus.approved
    )
    assert membership.joined_at >= first_joined


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["PENDING", "approved", "MAYBE", ""])
async def test_rejects_invalid_status(mock_uow, status):
    result = await UpdateMembershipStatusUseCase(mock_uow).execute(
        make_actor(UserRole.admin), uuid4(), status
    )

    assert result.is_err()
    assert result.error.code == "INVALID_STATUS"
    mock_uow.memberships.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_membership_is_not_found_even_for_members(mock_uow):
    """Existence is checked before permissions"""
    result = await UpdateMembershipStatusUseCase(mock_uow).execute(
        make_actor(UserRole.member), uuid4(), "APPROVED"
    )

    assert result.is_err()
    assert result.error.code == "MEMBERSHIP_NOT_FOUND"


@pytest.mark.asyncio
async def test_leader_of_other_club_is_forbidden(mock_uow):
    """Scenario: a leader of club B cannot approve a request for club A"""
    _, club_a = _leader_and_club()
    leader_b, _ = _leader_and_club()
    membership = make_membership(uuid4(), club_a.id)
    mock_uow.memberships.get_by_id.return_value = membership
    mock_uow.clubs.get_by_id.return_value = club_a

    result = await UpdateMembershipStatusUseCase(mock_uow).execute(
        leader_b, membership.id, "APPROVED"
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    assert membership.status == MembershipStatus.pending
    mock_uow.memberships.update_status.assert_not_called()
    mock_uow.commit.assert_not_called()
    mock_uow.notifications.create.assert_not_called()


@pytest.mark.asyncio
async def test_plain_member_is_forbidden(mock_uow):
    club = make_club()
    membership = make_membership(uuid4(), club.id)
    mock_uow.memberships.get_by_id.return_value = membership
    mock_uow.clubs.get_by_id.return_value = club

    result = await UpdateMembershipStatusUseCase(mock_uow).execute(
        make_actor(UserRole.member), membership.id, "REJECTED"
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.memberships.update_status.assert_not_called()
