"""
Password and refresh token helpers.

Passwords are bcrypt hashes; refresh tokens are opaque random strings
stored as SHA-256 digests so sessions can be looked up by token.
"""

import hashlib
import secrets
from datetime import datetime, timedelta
from uuid import UUID

import bcrypt

from club_service.domain.base import utcnow
from club_service.domain.entities import Session
from config import ApplicationConfig


def hash_password(password: str) -> str:
    password_hash = bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    )
    return password_hash.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def new_refresh_token() -> str:
    return secrets.token_urlsafe(32)


def hash_refresh_token(refresh_token: str) -> str:
    return hashlib.sha256(refresh_token.encode("utf-8")).hexdigest()


def refresh_token_expiry() -> datetime:
    return utcnow() + timedelta(days=ApplicationConfig.REFRESH_TOKEN_EXPIRE_DAYS)


def open_session(user_id: UUID, refresh_token: str) -> Session:
    """Session row for a freshly issued refresh token (only its digest is kept)"""
    return Session(
        user_id=user_id,
        refresh_token_hash=hash_refresh_token(refresh_token),
        expires_at=refresh_token_expiry(),
    )
