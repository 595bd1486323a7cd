"""Profile endpoints for the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from sqlalchemy.orm import Session

from lostfound.api.deps import get_current_user, get_image_store
from lostfound.core.database import get_db
from lostfound.schemas.auth import CurrentUser
from lostfound.schemas.user import UserProfile
from lostfound.services.profiles import get_profile, update_profile
from lostfound.services.storage import ImageStore

router = APIRouter()


async def submitted_contact_number(request: Request) -> str | None:
    """
    Raw contact_number form value: None when the field was omitted, "" when
    it was sent blank. Form() alone maps both to the default.
    """
    form = await request.form()
    if "contact_number" not in form:
        return None
    value = form["contact_number"]
    return value if isinstance(value, str) else ""


@router.get("/me", response_model=UserProfile)
def read_me(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> UserProfile:
    return UserProfile.model_validate(get_profile(db, current_user.id))


@router.put("/me", response_model=UserProfile)
def update_me(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    image_store: Annotated[ImageStore, Depends(get_image_store)],
    contact_number: Annotated[str | None, Depends(submitted_contact_number)],
    username: Annotated[str | None, Form()] = None,
    email: Annotated[str | None, Form()] = None,
    profile_pic: Annotated[UploadFile | None, File()] = None,
) -> UserProfile:
    """
    Update username, email, contact number and (optionally) profile picture.

    Omitting contact_number keeps the stored one; sending it blank clears it.
    """
    user = update_profile(
        db,
        current_user.id,
        username,
        email,
        contact_number=contact_number,
        profile_pic=profile_pic,
        image_store=image_store,
    )
    return UserProfile.model_validate(user)
