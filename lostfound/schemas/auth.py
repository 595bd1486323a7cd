"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """New account details."""

    username: str = Field(..., max_length=255, description="Unique username")
    email: str = Field(..., max_length=255, description="Unique email address")
    password: str = Field(..., max_length=128, description="Password (8-128 chars)")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., max_length=255, description="Account email")
    password: str = Field(..., max_length=128, description="Password")


class PublicUser(BaseModel):
    """Public projection of an account returned at login (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class LoginResponse(BaseModel):
    """JWT issued after successful login, plus the user it belongs to."""

    token: str = Field(..., description="JWT; send as Authorization: Bearer <token>")
    user: PublicUser


class CurrentUser(BaseModel):
    """Identity decoded from a verified bearer token."""

    id: int
    username: str | None = None


class MessageResponse(BaseModel):
    message: str
