"""SQLAlchemy declarative Base shared by the users and items tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models; alembic autogenerates from its metadata."""
