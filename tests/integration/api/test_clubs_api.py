from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select

from club_service.domain.entities import (
    Announcement,
    EventRsvp,
    Membership,
    User,
    UserRole,
)


@pytest.mark.asyncio
async def test_create_club_promotes_creator(
    client: AsyncClient, db_session, register, test_data
):
    leader_id, headers = await register("leader")

    response = await client.post("/clubs", json=test_data.club("chess"), headers=headers)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Chess Club"
    assert data["status"] == "ACTIVE"
    assert data["leader_id"] == leader_id
    assert data["member_count"] == 1

    user = (await db_session.exec(select(User).where(User.id == UUID(leader_id)))).one()
    assert user.role == UserRole.club_leader
    assert str(user.club_id) == data["id"]

    profile = await client.get("/auth/profile", headers=headers)
    assert profile.json()["user"]["role"] == "CLUB_LEADER"
    assert profile.json()["memberships"][0]["club_name"] == "Chess Club"


@pytest.mark.asyncio
async def test_create_club_duplicate_name(client: AsyncClient, register, create_club, test_data):
    await create_club()
    _, headers = await register("other_leader")

    response = await client.post("/clubs", json=test_data.club("chess"), headers=headers)

    assert response.status_code == 409
    assert response.json()["code"] == "CLUB_NAME_EXISTS"


@pytest.mark.asyncio
async def test_leader_cannot_create_second_club(client: AsyncClient, create_club, test_data):
    _, _, headers = await create_club()

    response = await client.post("/clubs", json=test_data.club("robotics"), headers=headers)

    assert response.status_code == 409
    assert response.json()["code"] == "ALREADY_LEADS_CLUB"


@pytest.mark.asyncio
async def test_create_club_validation(client: AsyncClient, register):
    _, headers = await register("leader")

    response = await client.post(
        "/clubs", json={"name": "X", "description": "short"}, headers=headers
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    fields = {error["field"] for error in body["errors"]}
    assert {"name", "description", "category"} <= fields


@pytest.mark.asyncio
async def test_list_clubs_is_public_and_filters_active(
    client: AsyncClient, admin, create_club
):
    chess_id, _, _ = await create_club("leader", "chess")
    robotics_id, _, _ = await create_club("other_leader", "robotics")
    _, admin_headers = admin
    await client.patch(
        f"/clubs/{robotics_id}/status", json={"status": "SUSPENDED"}, headers=admin_headers
    )

    response = await client.get("/clubs")

    assert response.status_code == 200
    data = response.json()
    assert [club["id"] for club in data["clubs"]] == [chess_id]
    assert data["pagination"] == {"page": 1, "limit": 12, "total": 1, "pages": 1}

    suspended = await client.get("/clubs", params={"status": "SUSPENDED"})
    assert [club["id"] for club in suspended.json()["clubs"]] == [robotics_id]


@pytest.mark.asyncio
async def test_search_and_categories(client: AsyncClient, create_club):
    await create_club("leader", "chess")
    await create_club("other_leader", "robotics")

    search = await client.get("/clubs", params={"search": "robot"})
    categories = await client.get("/clubs/categories")

    assert [club["name"] for club in search.json()["clubs"]] == ["Robotics Society"]
    assert categories.json() == {"categories": ["Games", "Technology"]}


@pytest.mark.asyncio
async def test_get_club_details(client: AsyncClient, create_club):
    club_id, leader_id, _ = await create_club()

    response = await client.get(f"/clubs/{club_id}")

    assert response.status_code == 200
    data = response.json()
    assert data["leader"]["id"] == leader_id
    assert data["meeting_day"] == "Tuesday"

    missing = await client.get("/clubs/00000000-0000-0000-0000-000000000000")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_update_club_by_leader(client: AsyncClient, create_club):
    club_id, _, headers = await create_club()

    response = await client.put(
        f"/clubs/{club_id}", json={"location": "Student Union"}, headers=headers
    )

    assert response.status_code == 200
    assert response.json()["location"] == "Student Union"
    assert response.json()["name"] == "Chess Club"


@pytest.mark.asyncio
async def test_update_club_by_other_leader_forbidden(client: AsyncClient, create_club):
    club_id, _, _ = await create_club("leader", "chess")
    _, _, other_headers = await create_club("other_leader", "robotics")

    response = await client.put(
        f"/clubs/{club_id}", json={"location": "Elsewhere"}, headers=other_headers
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_only_admin_changes_status(client: AsyncClient, create_club):
    club_id, _, headers = await create_club()

    response = await client.patch(
        f"/clubs/{club_id}/status", json={"status": "INACTIVE"}, headers=headers
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_delete_club_cascades(
    client: AsyncClient, db_session, admin, register, create_club, test_data
):
    club_id, leader_id, leader_headers = await create_club()
    _, member_headers = await register("member")
    await client.post(f"/memberships/join/{club_id}", headers=member_headers)
    event = await client.post(
        "/events", json=test_data.event("tournament", club_id), headers=leader_headers
    )
    event_id = event.json()["id"]
    await client.post(
        f"/events/{event_id}/rsvp",
        json={"status": "GOING"},
        headers=member_headers,
    )
    await client.post(
        "/announcements",
        json=test_data.announcement("room_change", club_id),
        headers=leader_headers,
    )
    _, admin_headers = admin

    response = await client.delete(f"/clubs/{club_id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "status": "deleted",
        "memberships_removed": 2,
        "events_removed": 1,
        "announcements_removed": 1,
    }
    assert (await db_session.exec(select(EventRsvp))).all() == []
    assert (await db_session.exec(select(Announcement))).all() == []

    remaining = await db_session.exec(
        select(Membership).where(Membership.club_id == UUID(club_id))
    )
    assert remaining.all() == []

    leader = (await db_session.exec(select(User).where(User.id == UUID(leader_id)))).one()
    assert leader.role == UserRole.member
    assert leader.club_id is None


@pytest.mark.asyncio
async def test_members_listing_visibility(client: AsyncClient, register, create_club):
    club_id, _, leader_headers = await create_club()
    _, member_headers = await register("member")
    await client.post(f"/memberships/join/{club_id}", headers=member_headers)

    as_leader = await client.get(
        f"/clubs/{club_id}/members", params={"status": "PENDING"}, headers=leader_headers
    )
    as_member = await client.get(f"/clubs/{club_id}/members", headers=member_headers)
    pending_as_member = await client.get(
        f"/clubs/{club_id}/members", params={"status": "PENDING"}, headers=member_headers
    )

    assert [m["first_name"] for m in as_leader.json()["members"]] == ["Uma"]
    assert [m["status"] for m in as_member.json()["members"]] == ["APPROVED"]
    assert pending_as_member.status_code == 403


@pytest.mark.asyncio
async def test_club_stats(client: AsyncClient, register, create_club):
    club_id, _, leader_headers = await create_club()
    _, member_headers = await register("member")
    _, bystander_headers = await register("bystander")
    await client.post(f"/memberships/join/{club_id}", headers=member_headers)

    response = await client.get(f"/clubs/{club_id}/stats", headers=leader_headers)
    forbidden = await client.get(f"/clubs/{club_id}/stats", headers=bystander_headers)

    assert response.status_code == 200
    assert response.json() == {
        "club_id": club_id,
        "approved": 1,
        "pending": 1,
        "rejected": 0,
    }
    assert forbidden.status_code == 403
