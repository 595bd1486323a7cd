"""SQLAlchemy ORM models."""

from lostfound.models.base import Base
from lostfound.models.report import REPORT_TYPES, ItemReport
from lostfound.models.user import User

__all__ = ["Base", "ItemReport", "REPORT_TYPES", "User"]
