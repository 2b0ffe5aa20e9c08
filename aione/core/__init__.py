"""Core app configuration and database."""

from aione.core.config import get_settings, settings
from aione.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
