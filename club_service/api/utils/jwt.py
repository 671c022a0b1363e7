from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(user_id: UUID, role: str) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User UUID
        role: User role (ADMIN, CLUB_LEADER, MEMBER)

    Returns:
        JWT token string (HS256, ACCESS_TOKEN_EXPIRE_MINUTES expiry)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "role": role,
        "exp": now + timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_EXPIRE_MINUTES),
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid or expired
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
