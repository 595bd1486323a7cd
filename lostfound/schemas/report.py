"""Schemas for lost/found item reports."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ReportType = Literal["lost", "found"]


class ContactInfo(BaseModel):
    """
    Owner contact details attached to a listed report.

    Every field is null when the owning user row is missing.
    """

    username: str | None = None
    email: str | None = None
    contact_number: str | None = None


class ReportOut(ContactInfo):
    """A report as listed on the board, enriched with its owner's contact info."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    location: str
    type: ReportType
    image_url: str | None = None
    user_id: int
    created_at: datetime | None = Field(
        default=None,
        description="Insertion time as stored; null if the row has none.",
    )


class ReportCreated(BaseModel):
    """Response after persisting a new report."""

    message: str = "Item added successfully"
    id: int = Field(..., description="Database ID of the created report.")
