"""Lost/found report listing, creation and owner-only deletion."""

import logging

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lostfound.models import REPORT_TYPES, ItemReport, User
from lostfound.schemas.report import ReportOut
from lostfound.services.errors import (
    ForbiddenError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    ServiceError,
)
from lostfound.services.persistence import commit
from lostfound.services.storage import ImageStore, has_upload

logger = logging.getLogger(__name__)


def list_reports(db: Session, report_type: str | None = None) -> list[ReportOut]:
    """
    Return reports newest-first (by id), each with its owner's contact info.

    report_type filters only when it is exactly "lost" or "found"; any other
    value lists everything. Owner fields are null when the user row is gone.
    """
    query = (
        db.query(ItemReport, User.username, User.email, User.contact_number)
        .outerjoin(User, User.id == ItemReport.user_id)
    )
    if report_type in REPORT_TYPES:
        query = query.filter(ItemReport.type == report_type)
    try:
        rows = query.order_by(ItemReport.id.desc()).all()
    except SQLAlchemyError as e:
        logger.exception("Listing reports failed")
        raise InternalError("Database error") from e

    return [
        ReportOut(
            id=report.id,
            name=report.name,
            description=report.description,
            location=report.location,
            type=report.type,
            image_url=report.image_url or None,
            user_id=report.user_id,
            created_at=report.created_at,
            username=username,
            email=email,
            contact_number=contact_number,
        )
        for report, username, email, contact_number in rows
    ]


def create_report(
    db: Session,
    user_id: int,
    name: str | None,
    description: str | None,
    location: str | None,
    report_type: str | None,
    image: UploadFile | None = None,
    image_store: ImageStore | None = None,
) -> ItemReport:
    """
    Validate and persist a report owned by user_id; returns the new row.

    The image, if any, is written only after the fields validate and is
    removed again if the insert fails.
    """
    fields = {
        "name": (name or "").strip(),
        "description": (description or "").strip(),
        "location": (location or "").strip(),
        "type": (report_type or "").strip(),
    }
    missing = [key for key, value in fields.items() if not value]
    if missing:
        raise InvalidArgumentError("Missing required fields: " + ", ".join(missing))
    if fields["type"] not in REPORT_TYPES:
        raise InvalidArgumentError("Type must be 'lost' or 'found'.")

    image_url = image_store.save(image) if has_upload(image) and image_store else None

    report = ItemReport(
        name=fields["name"],
        description=fields["description"],
        location=fields["location"],
        type=fields["type"],
        image_url=image_url,
        user_id=user_id,
    )
    db.add(report)
    try:
        commit(db, conflict_message="Report owner does not exist")
    except ServiceError:
        if image_url:
            image_store.discard(image_url)
        raise
    db.refresh(report)
    logger.info(
        "Report created",
        extra={"report_id": report.id, "report_type": report.type, "user_id": user_id},
    )
    return report


def delete_report(db: Session, report_id: int, requester_id: int) -> None:
    """
    Permanently delete a report. Only its owner may do so.

    Raises NotFoundError if no such report and ForbiddenError if
    requester_id is not the owner.
    """
    report = db.query(ItemReport).filter(ItemReport.id == report_id).first()
    if report is None:
        raise NotFoundError("Item not found")
    if report.user_id != requester_id:
        logger.info(
            "Report delete refused",
            extra={"report_id": report_id, "user_id": requester_id},
        )
        raise ForbiddenError("You can only delete your own items")

    db.delete(report)
    commit(db)
    logger.info("Report deleted", extra={"report_id": report_id, "user_id": requester_id})
