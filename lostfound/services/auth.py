"""Account registration and login."""

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from lostfound.core.config import Settings
from lostfound.core.security import (
    EMAIL_MAX_LEN,
    PASSWORD_MAX_BYTES,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    create_access_token,
    hash_password,
    verify_password,
)
from lostfound.models import User
from lostfound.services.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    UnauthenticatedError,
)
from lostfound.services.persistence import commit

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = "User already exists"


def _require(**fields: str | None) -> dict[str, str]:
    """Strip each field; raise InvalidArgumentError naming the first blank one."""
    cleaned: dict[str, str] = {}
    for name, value in fields.items():
        value = (value or "").strip()
        if not value:
            raise InvalidArgumentError(f"Field '{name}' is required.")
        cleaned[name] = value
    return cleaned


def register_user(
    db: Session,
    settings: Settings,
    username: str | None,
    email: str | None,
    password: str | None,
) -> User:
    """
    Create an account with a bcrypt hash of the password.

    Raises InvalidArgumentError for blank or out-of-range fields and
    ConflictError when the username or email is already taken, including
    when a concurrent registration wins the race to the unique index.
    """
    fields = _require(username=username, email=email)
    if not password or not password.strip():
        raise InvalidArgumentError("Field 'password' is required.")
    if len(fields["username"]) > USERNAME_MAX_LEN:
        raise InvalidArgumentError("Invalid username length.")
    if len(fields["email"]) > EMAIL_MAX_LEN:
        raise InvalidArgumentError("Invalid email length.")
    if not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
        raise InvalidArgumentError(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters."
        )
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise InvalidArgumentError(
            f"Password must not exceed {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded."
        )

    existing = (
        db.query(User)
        .filter(or_(User.username == fields["username"], User.email == fields["email"]))
        .first()
    )
    if existing is not None:
        raise ConflictError(USER_EXISTS_MESSAGE)

    user = User(
        username=fields["username"],
        email=fields["email"],
        password_hash=hash_password(password, settings.BCRYPT_ROUNDS),
    )
    db.add(user)
    commit(db, conflict_message=USER_EXISTS_MESSAGE)
    db.refresh(user)
    logger.info("User registered", extra={"user_id": user.id})
    return user


def authenticate(
    db: Session,
    settings: Settings,
    email: str | None,
    password: str | None,
) -> tuple[str, User]:
    """
    Check email/password and issue a session token.

    Returns (token, user). Raises NotFoundError for an unknown email and
    UnauthenticatedError when the password does not match.
    """
    fields = _require(email=email)
    if not password:
        raise InvalidArgumentError("Field 'password' is required.")

    user = db.query(User).filter(User.email == fields["email"]).first()
    if user is None:
        logger.info("Login failed", extra={"reason": "unknown_email"})
        raise NotFoundError("User not found")
    if not verify_password(password, user.password_hash):
        logger.info("Login failed", extra={"reason": "wrong_password", "user_id": user.id})
        raise UnauthenticatedError("Wrong password")

    token = create_access_token(user.id, user.username, settings)
    logger.info("Login succeeded", extra={"user_id": user.id})
    return token, user
