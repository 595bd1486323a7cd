"""Core app configuration, database and security."""

from lostfound.core.config import get_settings, settings
from lostfound.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
