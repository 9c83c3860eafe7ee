"""Password hashing, API access tokens and signed session payloads."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from app.core.config import settings

if TYPE_CHECKING:
    from app.core.config import Settings

# Matches users.username VARCHAR(64).
USERNAME_MAX_LEN = 64

# Audience claim that separates session cookies from API access tokens.
SESSION_AUDIENCE = "session"


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    cost = rounds if rounds is not None else settings.PASSWORD_COST
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=cost)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def generate_csrf_token() -> str:
    """Return a fresh form token: 32 random bytes, hex encoded."""
    return secrets.token_hex(32)


def create_access_token(sub: str | int) -> str:
    """Create a JWT access token with sub (user id), exp and iat."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token, including session cookies.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
    )


def encode_session(data: dict[str, Any], config: "Settings") -> str:
    """Sign session data into a cookie value that expires after SESSION_EXPIRE_MINUTES."""
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "aud": SESSION_AUDIENCE,
        "data": data,
        "exp": now + timedelta(minutes=config.SESSION_EXPIRE_MINUTES),
        "iat": now,
    }
    return jwt.encode(
        payload,
        config.JWT_SECRET.get_secret_value(),
        algorithm=config.JWT_ALGORITHM,
    )


def decode_session(value: str, config: "Settings") -> dict[str, Any]:
    """
    Verify a session cookie value and return the stored data dict.
    Raises jwt.PyJWTError on a tampered, expired or foreign token.
    """
    payload = jwt.decode(
        value,
        config.JWT_SECRET.get_secret_value(),
        algorithms=[config.JWT_ALGORITHM],
        audience=SESSION_AUDIENCE,
    )
    data = payload.get("data")
    if not isinstance(data, dict):
        raise jwt.InvalidTokenError("Session payload is not an object")
    return data
