"""Schemas for the authenticated user's own profile."""

from pydantic import BaseModel, ConfigDict


class UserProfile(BaseModel):
    """Profile projection returned by /users/me (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    profile_pic: str | None = None
    contact_number: str | None = None
