import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from club_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from club_service.app.services.security import hash_password
from club_service.depends import get_unit_of_work
from club_service.domain.entities import User, UserRole
from config import ApplicationConfig
from tests.fixtures.json_loader import TestDataLoader


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from club_service.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def isolated_client(engine):
    """Client whose every request gets its own database session"""
    from club_service.api.app import create_app

    app = create_app(ApplicationConfig)
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def per_request_unit_of_work():
        async with Session() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = per_request_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def bearer(access_token: str) -> dict:
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def register(client, test_data):
    """Register a user from test_data.json; returns (user_id, auth headers)"""

    async def _register(name: str):
        response = await client.post("/auth/register", json=test_data.user(name))
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"]["id"], bearer(body["access_token"])

    return _register


@pytest_asyncio.fixture
async def admin(client, db_session, test_data):
    """Seeded ADMIN account; returns (user_id, auth headers)"""
    payload = test_data.user("admin")
    user = User(
        email=payload["email"],
        password_hash=hash_password(payload["password"]),
        first_name=payload["first_name"],
        last_name=payload["last_name"],
        role=UserRole.admin,
    )
    db_session.add(user)
    await db_session.commit()

    response = await client.post(
        "/auth/login",
        json={"email": payload["email"], "password": payload["password"]},
    )
    assert response.status_code == 200, response.text
    return str(user.id), bearer(response.json()["access_token"])


@pytest.fixture
def create_club(client, register, test_data):
    """Register a leader and let them create a club; returns (club_id, leader_id, headers)"""

    async def _create_club(leader: str = "leader", club: str = "chess"):
        leader_id, headers = await register(leader)
        response = await client.post("/clubs", json=test_data.club(club), headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["id"], leader_id, headers

    return _create_club
