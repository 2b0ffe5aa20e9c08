"""ORM models for scheduled aircraft presentations and their attendees."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from aione.models.base import Base
from aione.models.user import utcnow

PRESENTATION_STATUSES = ("scheduled", "in-progress", "completed", "cancelled")
DEFAULT_PRESENTATION_STATUS = "scheduled"

presentation_attendees = Table(
    "presentation_attendees",
    Base.metadata,
    Column(
        "presentation_id",
        Integer,
        ForeignKey("presentations.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Presentation(Base):
    """A presentation of one aircraft, given by a presenter to a list of attendees."""

    __tablename__ = "presentations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    scheduled_date = Column(DateTime(timezone=True), nullable=False, index=True)
    # Minutes.
    duration = Column(Integer, nullable=False)
    status = Column(String(32), nullable=False, default=DEFAULT_PRESENTATION_STATUS)
    aircraft_id = Column(Integer, ForeignKey("aircraft.id"), nullable=False, index=True)
    presenter_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    aircraft = relationship("Aircraft", lazy="joined")
    presenter = relationship("User", lazy="joined")
    attendees = relationship(
        "User",
        secondary=presentation_attendees,
        lazy="selectin",
        order_by="User.id",
    )
