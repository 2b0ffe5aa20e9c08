"""ORM model for application users (auth and RBAC)."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Integer, String

from aione.models.base import Base

ROLES = ("admin", "manager", "viewer")
DEFAULT_ROLE = "viewer"


def utcnow() -> datetime:
    return datetime.now(UTC)


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin', 'manager' or 'viewer'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=DEFAULT_ROLE)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
