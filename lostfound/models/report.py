"""ORM model for lost/found item reports."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)

from lostfound.models.base import Base

# Allowed values for ItemReport.type
REPORT_TYPES = ("lost", "found")


class ItemReport(Base):
    """
    One lost or found posting. user_id is the owner, the only account
    allowed to delete it.
    """

    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint("type IN ('lost', 'found')", name="ck_items_type"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False)
    type = Column(String(16), nullable=False, index=True)
    image_url = Column(String(1024), nullable=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
