"""Registration and JWT login endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from lostfound.core.config import Settings, get_settings
from lostfound.core.database import get_db
from lostfound.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PublicUser,
    RegisterRequest,
)
from lostfound.services.auth import authenticate, register_user
from lostfound.services.errors import NotFoundError, UnauthenticatedError

router = APIRouter()


@router.post("/register", response_model=MessageResponse)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Create an account. 400 if a field is blank or the username/email is taken."""
    register_user(db, settings, body.username, body.email, body.password)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT valid for one day.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        token, user = authenticate(db, settings, body.email, body.password)
    except (NotFoundError, UnauthenticatedError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    return LoginResponse(token=token, user=PublicUser.model_validate(user))
