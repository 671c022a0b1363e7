from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from club_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from club_service.api.error import ClientError
from club_service.api.utils.jwt import verify_jwt
from club_service.app.services.authorization import Actor, AuthorizationGuard
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import UserRole
from club_service.libs.result import Error

engine = create_async_engine(
    ApplicationConfig.DB_URI, echo=ApplicationConfig.DB_ECHO, future=True
)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# auto_error=False so a missing header is a 401, not FastAPI's default
security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id and role

    Raises:
        ClientError: 401 if token is missing, invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Access token is required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(credentials.credentials)

    if payload is None or "user_id" not in payload:
        raise ClientError(
            Error("UNAUTHORIZED", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return payload


async def get_current_actor(
    payload: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Actor:
    """
    Resolve the token subject to a fresh Actor.

    Role and club affiliation are read from the database on every request
    so promotions and deactivations apply immediately.

    Raises:
        ClientError: 401 if the user no longer exists, 403 if deactivated
    """
    try:
        user_id = UUID(payload["user_id"])
    except ValueError:
        raise ClientError(
            Error("UNAUTHORIZED", "Invalid token subject"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    async with uow:
        user = await uow.users.get_by_id(user_id)

        if user is None:
            raise ClientError(
                Error("UNAUTHORIZED", "User not found"),
                status_code=status.HTTP_401_UNAUTHORIZED,
            )

        if not user.is_active:
            raise ClientError(
                Error("ACCOUNT_DEACTIVATED", "Account is deactivated"),
                status_code=status.HTTP_403_FORBIDDEN,
            )

        return Actor(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            club_id=user.club_id,
        )


def require_roles(*roles: UserRole):
    """Dependency factory gating a route to the given roles"""

    async def dependency(actor: Actor = Depends(get_current_actor)) -> Actor:
        error = AuthorizationGuard.require_role(actor, *roles)
        if error is not None:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        return actor

    return dependency
