"""Request dependencies: bearer-token verification and image storage."""

import logging
from typing import Annotated

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from lostfound.core.config import Settings, get_settings
from lostfound.core.security import decode_access_token
from lostfound.schemas.auth import CurrentUser
from lostfound.services.errors import InternalError, UnauthenticatedError
from lostfound.services.storage import ImageStore

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the identity it carries.

    401 when the header is missing, malformed, or the token is invalid or
    expired. Any other verification failure is a server fault (500).
    """
    if credentials is None:
        if "authorization" not in request.headers:
            raise UnauthenticatedError("No token provided")
        raise UnauthenticatedError("Malformed token")

    try:
        payload = decode_access_token(credentials.credentials, settings)
    except jwt.InvalidTokenError:
        raise UnauthenticatedError("Invalid or expired token")
    except Exception as e:
        logger.exception("Token verification failed unexpectedly")
        raise InternalError("Token verification failed") from e

    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise UnauthenticatedError("Invalid or expired token")
    username = payload.get("username")
    return CurrentUser(id=user_id, username=username if isinstance(username, str) else None)


def get_image_store(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ImageStore:
    """Dependency: image store rooted at UPLOAD_DIR, served under UPLOAD_URL_PREFIX."""
    return ImageStore(
        settings.UPLOAD_DIR,
        settings.UPLOAD_URL_PREFIX,
        settings.MAX_UPLOAD_BYTES,
    )
