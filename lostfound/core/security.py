"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

if TYPE_CHECKING:
    from lostfound.core.config import Settings

# Session tokens live for one day; clients log in again afterwards.
ACCESS_TOKEN_TTL = timedelta(days=1)

# Min/max lengths for registration input validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128
# bcrypt only reads the first 72 bytes of a password.
PASSWORD_MAX_BYTES = 72


def hash_password(plain_password: str, rounds: int) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt rejects longer input; register_user refuses passwords over PASSWORD_MAX_BYTES.
    pw_bytes = plain_password.encode("utf-8")[:PASSWORD_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:PASSWORD_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    username: str,
    settings: "Settings",
    now: datetime | None = None,
) -> str:
    """Create a JWT carrying the user id (as sub and id), username, iat and exp."""
    now = now or datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "id": user_id,
        "username": username,
        "iat": now,
        "exp": now + ACCESS_TOKEN_TTL,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: "Settings") -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, id, username, exp, iat).
    Raises jwt.InvalidTokenError on a bad signature, expired or malformed token.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "sub"]},
    )
