"""ORM model for registered board users."""

from sqlalchemy import Column, DateTime, Integer, String, func

from lostfound.models.base import Base


class User(Base):
    """
    User account for JWT authentication and report ownership.

    username and email are each unique across all users.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    profile_pic = Column(String(1024), nullable=True)
    contact_number = Column(String(64), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
