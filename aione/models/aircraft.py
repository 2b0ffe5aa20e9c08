"""ORM model for tracked aircraft records."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from aione.models.base import Base
from aione.models.user import utcnow

DEFAULT_AIRCRAFT_STATUS = "active"


class Aircraft(Base):
    """
    An aircraft identified by its unique tail number and owned by the user who created it.

    specifications holds free-form attributes (engines, seating, range, ...).
    """

    __tablename__ = "aircraft"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tail_number = Column(String(32), nullable=False, unique=True, index=True)
    model = Column(String(255), nullable=False)
    manufacturer = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
    status = Column(String(64), nullable=False, default=DEFAULT_AIRCRAFT_STATUS)
    specifications = Column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
        default=dict,
    )
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    owner = relationship("User", lazy="joined")
