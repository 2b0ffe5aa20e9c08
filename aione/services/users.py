"""User listing for administrators."""

from sqlalchemy.orm import Session

from aione.models.user import User
from aione.schemas.auth import UserPublic


def list_users(db: Session) -> list[UserPublic]:
    """All users ordered by id, without password hashes."""
    users = db.query(User).order_by(User.id).all()
    return [UserPublic.model_validate(u) for u in users]
