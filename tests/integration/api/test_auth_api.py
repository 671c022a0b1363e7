import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_register(client: AsyncClient, test_data):
    payload = test_data.user("member")

    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["user"]["email"] == payload["email"]
    assert data["user"]["role"] == "MEMBER"
    assert data["user"]["is_active"] is True
    assert "password_hash" not in data["user"]
    assert data["access_token"]
    assert data["refresh_token"]


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, register, test_data):
    await register("member")
    payload = test_data.user("member")
    payload["student_id"] = "S9999"

    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 409
    assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_register_duplicate_student_id(client: AsyncClient, register, test_data):
    await register("member")
    payload = test_data.user("bystander")
    payload["student_id"] = test_data.user("member")["student_id"]

    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 409
    assert response.json()["code"] == "STUDENT_ID_EXISTS"


@pytest.mark.asyncio
async def test_register_rejects_invalid_payloads(client: AsyncClient, test_data):
    for payload in test_data.get_copy("invalid_registrations"):
        response = await client.post("/auth/register", json=payload)

        assert response.status_code == 400, payload
        assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_login_and_profile(client: AsyncClient, register, test_data):
    await register("member")
    payload = test_data.user("member")

    login = await client.post(
        "/auth/login", json={"email": payload["email"], "password": payload["password"]}
    )

    assert login.status_code == 200
    token = login.json()["access_token"]
    profile = await client.get(
        "/auth/profile", headers={"Authorization": f"Bearer {token}"}
    )
    assert profile.status_code == 200
    assert profile.json()["user"]["email"] == payload["email"]
    assert profile.json()["memberships"] == []


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, register, test_data):
    await register("member")

    response = await client.post(
        "/auth/login",
        json={"email": test_data.user("member")["email"], "password": "Wrong1234"},
    )

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_refresh_rotates_and_invalidates_old_token(client: AsyncClient, test_data):
    register = await client.post("/auth/register", json=test_data.user("member"))
    old_refresh = register.json()["refresh_token"]

    refreshed = await client.post("/auth/refresh-token", json={"refresh_token": old_refresh})
    replay = await client.post("/auth/refresh-token", json={"refresh_token": old_refresh})

    assert refreshed.status_code == 200
    assert refreshed.json()["refresh_token"] != old_refresh
    assert replay.status_code == 401


@pytest.mark.asyncio
async def test_logout_revokes_refresh_token(client: AsyncClient, test_data):
    register = await client.post("/auth/register", json=test_data.user("member"))
    body = register.json()
    headers = {"Authorization": f"Bearer {body['access_token']}"}

    logout = await client.post(
        "/auth/logout", json={"refresh_token": body["refresh_token"]}, headers=headers
    )
    refresh = await client.post(
        "/auth/refresh-token", json={"refresh_token": body["refresh_token"]}
    )

    assert logout.status_code == 200
    assert logout.json()["sessions_revoked"] == 1
    assert refresh.status_code == 401
    assert refresh.json()["code"] == "SESSION_REVOKED"


@pytest.mark.asyncio
async def test_invalid_bearer_token(client: AsyncClient):
    response = await client.get(
        "/auth/profile", headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
