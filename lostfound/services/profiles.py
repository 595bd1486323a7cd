"""Read and update the authenticated user's own profile."""

import logging
import re

from fastapi import UploadFile
from sqlalchemy import or_
from sqlalchemy.orm import Session

from lostfound.core.security import EMAIL_MAX_LEN, USERNAME_MAX_LEN
from lostfound.models import User
from lostfound.services.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    ServiceError,
)
from lostfound.services.persistence import commit
from lostfound.services.storage import ImageStore, has_upload

logger = logging.getLogger(__name__)

# Digits, spaces, +, -, and parentheses only.
CONTACT_NUMBER_PATTERN = re.compile(r"^[0-9+\-\s()]+$")
CONTACT_NUMBER_MAX_LEN = 64

TAKEN_MESSAGE = "Username or email already in use"


def get_profile(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise NotFoundError("User not found")
    return user


def normalize_contact_number(value: str) -> str | None:
    """Blank clears the number; otherwise it must use phone characters only."""
    value = value.strip()
    if not value:
        return None
    if len(value) > CONTACT_NUMBER_MAX_LEN or not CONTACT_NUMBER_PATTERN.match(value):
        raise InvalidArgumentError(
            "Invalid contact number format. Use digits, spaces, +, - and parentheses."
        )
    return value


def update_profile(
    db: Session,
    user_id: int,
    username: str | None,
    email: str | None,
    contact_number: str | None = None,
    profile_pic: UploadFile | None = None,
    image_store: ImageStore | None = None,
) -> User:
    """
    Update username/email, and optionally the contact number and picture path.

    contact_number None leaves the stored value alone; without a new
    profile_pic upload the current picture path is kept. Returns the user
    re-read from the database after commit.
    """
    username = (username or "").strip()
    email = (email or "").strip()
    if not username or not email:
        raise InvalidArgumentError("Username and email are required.")
    if len(username) > USERNAME_MAX_LEN or len(email) > EMAIL_MAX_LEN:
        raise InvalidArgumentError("Username or email is too long.")
    new_contact = (
        normalize_contact_number(contact_number) if contact_number is not None else None
    )

    user = get_profile(db, user_id)

    taken = (
        db.query(User.id)
        .filter(User.id != user_id)
        .filter(or_(User.username == username, User.email == email))
        .first()
    )
    if taken is not None:
        raise ConflictError(TAKEN_MESSAGE)

    new_pic = image_store.save(profile_pic) if has_upload(profile_pic) and image_store else None

    user.username = username
    user.email = email
    if contact_number is not None:
        user.contact_number = new_contact
    if new_pic:
        user.profile_pic = new_pic
    try:
        commit(db, conflict_message=TAKEN_MESSAGE)
    except ServiceError:
        if new_pic:
            image_store.discard(new_pic)
        raise

    logger.info("Profile updated", extra={"user_id": user_id})
    return get_profile(db, user_id)
