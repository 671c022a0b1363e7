from uuid import uuid4

from club_service.app.services.authorization import AuthorizationGuard
from club_service.domain.entities import UserRole
from tests.fixtures.factories import make_actor, make_club


def test_require_role_allows_listed_roles():
    actor = make_actor(UserRole.club_leader)

    assert AuthorizationGuard.require_role(actor, UserRole.admin, UserRole.club_leader) is None


def test_require_role_forbids_other_roles():
    error = AuthorizationGuard.require_role(make_actor(UserRole.member), UserRole.admin)

    assert error is not None
    assert error.code == "FORBIDDEN"


def test_admin_manages_every_club():
    admin = make_actor(UserRole.admin)

    assert AuthorizationGuard.require_club_manager(admin, make_club()) is None
    assert AuthorizationGuard.is_club_manager(admin, make_club())


def test_leader_manages_only_own_club():
    club = make_club()
    leader = make_actor(UserRole.club_leader, club_id=club.id)

    assert AuthorizationGuard.require_club_manager(leader, club) is None

    error = AuthorizationGuard.require_club_manager(leader, make_club())
    assert error.code == "FORBIDDEN"
    assert error.message == "You can only manage your own club"


def test_leader_without_affiliation_manages_nothing():
    club = make_club()
    leader = make_actor(UserRole.club_leader, user_id=club.leader_id)

    assert not AuthorizationGuard.is_club_manager(leader, club)


def test_member_manages_nothing():
    club = make_club()
    member = make_actor(UserRole.member, club_id=club.id)

    error = AuthorizationGuard.require_club_manager(member, club)
    assert error.code == "FORBIDDEN"
    assert error.message == "Only club leaders can manage this club"


def test_require_owner():
    actor = make_actor()

    assert AuthorizationGuard.require_owner(actor, actor.id) is None
    assert AuthorizationGuard.require_owner(actor, uuid4()).code == "FORBIDDEN"
