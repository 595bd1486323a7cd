"""Commit helper that turns SQLAlchemy failures into service errors."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from lostfound.services.errors import ConflictError, InternalError

logger = logging.getLogger(__name__)


def commit(db: Session, conflict_message: str = "Conflicting record already exists") -> None:
    """
    Commit the session. A constraint violation rolls back and raises ConflictError;
    any other store failure rolls back and raises InternalError.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Commit rejected by constraint: %s", type(e.orig).__name__)
        raise ConflictError(conflict_message) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database commit failed")
        raise InternalError("Database error") from e
