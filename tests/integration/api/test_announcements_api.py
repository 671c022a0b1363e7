import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_post_announcement_notifies_approved_members(
    client: AsyncClient, register, create_club, test_data
):
    club_id, leader_id, leader_headers = await create_club()
    _, member_headers = await register("member")
    join = await client.post(f"/memberships/join/{club_id}", headers=member_headers)
    await client.patch(
        f"/memberships/{join.json()['membership']['id']}/status",
        json={"status": "APPROVED"},
        headers=leader_headers,
    )
    _, pending_headers = await register("bystander")
    await client.post(f"/memberships/join/{club_id}", headers=pending_headers)

    response = await client.post(
        "/announcements",
        json=test_data.announcement("room_change", club_id),
        headers=leader_headers,
    )

    assert response.status_code == 201
    data = response.json()
    assert data["priority"] == "high"
    assert data["club_name"] == "Chess Club"
    assert data["author"]["id"] == leader_id

    member_inbox = await client.get("/notifications", headers=member_headers)
    pending_inbox = await client.get("/notifications", headers=pending_headers)
    announcement = next(
        n
        for n in member_inbox.json()["notifications"]
        if n["title"] == "Announcement: Room change"
    )
    assert announcement["message"].endswith("...")
    assert len(announcement["message"]) == 103
    assert announcement["link"] == f"/clubs/{club_id}"
    assert all(
        not n["title"].startswith("Announcement")
        for n in pending_inbox.json()["notifications"]
    )


@pytest.mark.asyncio
async def test_announcement_feed_is_public(
    client: AsyncClient, create_club, test_data
):
    chess_id, _, chess_headers = await create_club()
    robotics_id, _, robotics_headers = await create_club("other_leader", "robotics")
    await client.post(
        "/announcements",
        json=test_data.announcement("room_change", chess_id),
        headers=chess_headers,
    )
    await client.post(
        "/announcements",
        json={
            "club_id": robotics_id,
            "title": "Parts order",
            "content": "Servo motors arrive on Friday afternoon.",
        },
        headers=robotics_headers,
    )

    feed = await client.get("/announcements")
    chess_only = await client.get("/announcements", params={"club_id": chess_id})

    assert feed.status_code == 200
    assert [a["title"] for a in feed.json()["announcements"]] == [
        "Parts order",
        "Room change",
    ]
    assert feed.json()["announcements"][0]["priority"] == "normal"
    assert [a["title"] for a in chess_only.json()["announcements"]] == ["Room change"]


@pytest.mark.asyncio
async def test_announcement_permissions_and_delete(
    client: AsyncClient, register, create_club, test_data
):
    club_id, _, leader_headers = await create_club()
    _, _, other_headers = await create_club("other_leader", "robotics")
    _, member_headers = await register("member")

    forbidden = await client.post(
        "/announcements",
        json=test_data.announcement("room_change", club_id),
        headers=member_headers,
    )
    too_short = await client.post(
        "/announcements",
        json={"club_id": club_id, "title": "Hi", "content": "short"},
        headers=leader_headers,
    )
    created = await client.post(
        "/announcements",
        json=test_data.announcement("room_change", club_id),
        headers=leader_headers,
    )
    announcement_id = created.json()["id"]

    foreign_delete = await client.delete(
        f"/announcements/{announcement_id}", headers=other_headers
    )
    deleted = await client.delete(
        f"/announcements/{announcement_id}", headers=leader_headers
    )
    missing = await client.delete(
        f"/announcements/{announcement_id}", headers=leader_headers
    )

    assert forbidden.status_code == 403
    assert too_short.status_code == 400
    assert too_short.json()["code"] == "VALIDATION_ERROR"
    assert foreign_delete.status_code == 403
    assert deleted.status_code == 200
    assert missing.status_code == 404
    assert missing.json()["code"] == "ANNOUNCEMENT_NOT_FOUND"
