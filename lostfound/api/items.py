"""Lost/found item report endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.orm import Session

from lostfound.api.deps import get_current_user, get_image_store
from lostfound.core.database import get_db
from lostfound.schemas.auth import CurrentUser, MessageResponse
from lostfound.schemas.report import ReportCreated, ReportOut
from lostfound.services.errors import ForbiddenError
from lostfound.services.reports import create_report, delete_report, list_reports
from lostfound.services.storage import ImageStore

router = APIRouter()


@router.get("", response_model=list[ReportOut])
def get_items(
    db: Annotated[Session, Depends(get_db)],
    report_type: Annotated[
        str | None,
        Query(alias="type", description="Only 'lost' or 'found' filter; anything else lists all."),
    ] = None,
) -> list[ReportOut]:
    """List reports, newest first, with each owner's contact info."""
    return list_reports(db, report_type)


@router.post("", response_model=ReportCreated)
def post_item(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    image_store: Annotated[ImageStore, Depends(get_image_store)],
    name: Annotated[str | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    location: Annotated[str | None, Form()] = None,
    report_type: Annotated[str | None, Form(alias="type")] = None,
    user_id: Annotated[int | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> ReportCreated:
    """
    Create a report owned by the authenticated user (multipart form).

    user_id is accepted for older clients but must match the token's user.
    """
    if user_id is not None and user_id != current_user.id:
        raise ForbiddenError("Cannot create a report for another user")
    report = create_report(
        db,
        current_user.id,
        name,
        description,
        location,
        report_type,
        image=image,
        image_store=image_store,
    )
    return ReportCreated(id=report.id)


@router.delete("/{item_id}", response_model=MessageResponse)
def remove_item(
    item_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    """Permanently delete one of your own reports. 403 for anyone else's."""
    delete_report(db, item_id, current_user.id)
    return MessageResponse(message="Item deleted successfully")
