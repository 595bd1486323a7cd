"""Health check endpoint with optional database connectivity check."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lostfound.core.config import Settings, get_settings
from lostfound.core.database import check_db_connected, get_db
from lostfound.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """
    Return service health status, server time and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        timestamp=datetime.now(UTC),
        environment=settings.APP_ENV,
        database=db_status,
    )
