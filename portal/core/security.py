"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from portal.core.config import settings

# bcrypt reads at most 72 bytes of input; longer passwords are rejected, never truncated.
PASSWORD_MAX_BYTES = 72


class PasswordHashError(Exception):
    """Raised when bcrypt cannot hash or check a password (e.g. a corrupt stored hash)."""


def password_too_long(plain_password: str) -> bool:
    return len(plain_password.encode("utf-8")) > PASSWORD_MAX_BYTES


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    if password_too_long(plain_password):
        raise PasswordHashError(f"password exceeds {PASSWORD_MAX_BYTES} bytes")
    try:
        salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
        return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")
    except (ValueError, TypeError) as e:
        raise PasswordHashError("bcrypt hashing failed") from e


def verify_password(plain_password: str, hashed: str) -> bool:
    """
    Verify a plain password against a stored hash (constant-time compare inside bcrypt).

    A password over PASSWORD_MAX_BYTES can never match, since none is ever stored.
    Raises PasswordHashError if the stored hash is malformed.
    """
    if password_too_long(plain_password):
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed.encode("utf-8"))
    except (ValueError, TypeError) as e:
        raise PasswordHashError("stored password hash is not a valid bcrypt hash") from e


def create_access_token(email: str, role: str) -> str:
    """Create a JWT access token with sub/email (account email), role, iat and exp."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": email,
        "email": email,
        "role": role,
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
    Decode and validate JWT; return payload (sub, email, role, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "sub"]},
    )
