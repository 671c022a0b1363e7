import pytest
from unittest.mock import AsyncMock, MagicMock

from club_service.domain.base import utcnow
from club_service.domain.entities import MembershipStatus


async def _echo(entity):
    return entity


async def _update_status(membership, status):
    membership.status = status
    membership.joined_at = utcnow() if status == MembershipStatus.approved else None
    return membership


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_ids = AsyncMock(return_value=[])
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_student_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=_echo)
    uow.users.update = AsyncMock(side_effect=_echo)

    uow.clubs = MagicMock()
    uow.clubs.get_by_id = AsyncMock(return_value=None)
    uow.clubs.get_by_name = AsyncMock(return_value=None)
    uow.clubs.get_by_leader_id = AsyncMock(return_value=[])
    uow.clubs.get_by_ids = AsyncMock(return_value=[])
    uow.clubs.create = AsyncMock(side_effect=_echo)
    uow.clubs.update = AsyncMock(side_effect=_echo)
    uow.clubs.delete = AsyncMock()

    uow.memberships = MagicMock()
    uow.memberships.get_by_id = AsyncMock(return_value=None)
    uow.memberships.get_by_user_and_club = AsyncMock(return_value=None)
    uow.memberships.get_by_club_id = AsyncMock(return_value=[])
    uow.memberships.create = AsyncMock(side_effect=_echo)
    uow.memberships.update_status = AsyncMock(side_effect=_update_status)
    uow.memberships.delete = AsyncMock()
    uow.memberships.delete_by_club_id = AsyncMock(return_value=0)
    uow.memberships.count_approved_by_club_ids = AsyncMock(return_value={})

    uow.notifications = MagicMock()
    uow.notifications.get_by_id = AsyncMock(return_value=None)
    uow.notifications.create = AsyncMock(side_effect=_echo)
    uow.notifications.update = AsyncMock(side_effect=_echo)
    uow.notifications.delete = AsyncMock()

    uow.events = MagicMock()
    uow.events.get_by_id = AsyncMock(return_value=None)
    uow.events.create = AsyncMock(side_effect=_echo)
    uow.events.update = AsyncMock(side_effect=_echo)
    uow.events.delete = AsyncMock()
    uow.events.delete_by_club_id = AsyncMock(return_value=0)

    uow.rsvps = MagicMock()
    uow.rsvps.get_by_user_and_event = AsyncMock(return_value=None)
    uow.rsvps.get_by_event_id = AsyncMock(return_value=[])
    uow.rsvps.create = AsyncMock(side_effect=_echo)
    uow.rsvps.update = AsyncMock(side_effect=_echo)
    uow.rsvps.count_by_event_and_status = AsyncMock(return_value=0)
    uow.rsvps.count_going_by_event_ids = AsyncMock(return_value={})
    uow.rsvps.delete_by_event_id = AsyncMock(return_value=0)
    uow.rsvps.delete_by_club_id = AsyncMock(return_value=0)

    uow.announcements = MagicMock()
    uow.announcements.get_by_id = AsyncMock(return_value=None)
    uow.announcements.create = AsyncMock(side_effect=_echo)
    uow.announcements.delete = AsyncMock()
    uow.announcements.delete_by_club_id = AsyncMock(return_value=0)

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock(side_effect=_echo)
    uow.sessions.update = AsyncMock(side_effect=_echo)
    uow.sessions.find_by_refresh_token = AsyncMock(return_value=None)
    uow.sessions.revoke_all_by_user_id = AsyncMock(return_value=0)

    return uow
