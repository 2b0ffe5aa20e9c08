"""SQLAlchemy ORM models."""

from aione.models.aircraft import Aircraft
from aione.models.base import Base
from aione.models.presentation import Presentation, presentation_attendees
from aione.models.user import User

__all__ = ["Aircraft", "Base", "Presentation", "User", "presentation_attendees"]
