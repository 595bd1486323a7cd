"""Pydantic request/response schemas."""

from lostfound.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PublicUser,
    RegisterRequest,
)
from lostfound.schemas.health import HealthResponse
from lostfound.schemas.report import ContactInfo, ReportCreated, ReportOut, ReportType
from lostfound.schemas.user import UserProfile

__all__ = [
    "ContactInfo",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PublicUser",
    "RegisterRequest",
    "ReportCreated",
    "ReportOut",
    "ReportType",
    "UserProfile",
]
