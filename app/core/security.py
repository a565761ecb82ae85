"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any, NamedTuple

import bcrypt
import jwt

from app.core.config import Settings, get_settings

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128


class TokenIdentity(NamedTuple):
    """Identity carried by an access token."""

    username: str
    role: str


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    if rounds is None:
        rounds = get_settings().BCRYPT_ROUNDS
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes never match."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


def create_access_token(
    username: str,
    role: str,
    settings: Settings | None = None,
) -> str:
    """
    Create a JWT access token carrying username and role.

    No exp claim is added unless JWT_EXPIRE_MINUTES is configured; such
    tokens stay valid for as long as the signing secret does.
    """
    settings = settings or get_settings()
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "username": username,
        "role": role,
        "iat": now,
    }
    if settings.JWT_EXPIRE_MINUTES is not None:
        payload["exp"] = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: Settings | None = None) -> TokenIdentity:
    """
    Decode and validate JWT; return the (username, role) identity.
    Raises jwt.InvalidTokenError on a bad signature, malformed or expired token,
    or a payload without string username and role claims.
    """
    settings = settings or get_settings()
    payload = jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
    )
    username = payload.get("username")
    role = payload.get("role")
    if not isinstance(username, str) or not isinstance(role, str):
        raise jwt.InvalidTokenError("Token payload must carry username and role")
    return TokenIdentity(username=username, role=role)
