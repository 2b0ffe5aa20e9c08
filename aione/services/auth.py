"""Registration, login and profile lookup. Issues bearer tokens for authenticated users."""

import logging
import re

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from aione.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from aione.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    create_access_token,
    hash_password,
    verify_password,
)
from aione.models.user import DEFAULT_ROLE, ROLES, User
from aione.schemas.auth import AuthResponse, UserPublic

logger = logging.getLogger(__name__)

# Same text for unknown email and wrong password so callers cannot tell which failed.
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"
USER_EXISTS_MESSAGE = "User already exists"

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _issue(user: User) -> AuthResponse:
    token = create_access_token(user_id=user.id, username=user.username, role=user.role)
    return AuthResponse(token=token, user=UserPublic.model_validate(user))


def _validate_registration(username: str, email: str, password: str, role: str) -> None:
    if not username or not email or not password:
        raise ValidationError("Username, email and password are required")
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        raise ValidationError("Invalid username length.")
    if not _EMAIL_RE.match(email):
        raise ValidationError("Invalid email address.")
    if len(password) < PASSWORD_MIN_LEN:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LEN} characters long"
        )
    if len(password) > PASSWORD_MAX_LEN:
        raise ValidationError(
            f"Password must be at most {PASSWORD_MAX_LEN} characters long"
        )
    if role not in ROLES:
        raise ValidationError(f"Role must be one of: {', '.join(ROLES)}")


def register(
    db: Session,
    username: str,
    email: str,
    password: str,
    role: str | None = None,
) -> AuthResponse:
    """
    Create a user and return a fresh token with the public user fields.

    Raises ValidationError for missing/invalid input and ConflictError when the
    username or email is already taken.
    """
    username = (username or "").strip()
    email = (email or "").strip().lower()
    password = password or ""
    role = (role or DEFAULT_ROLE).strip().lower()
    _validate_registration(username, email, password, role)

    existing = (
        db.query(User)
        .filter(or_(User.username == username, User.email == email))
        .first()
    )
    if existing is not None:
        raise ConflictError(USER_EXISTS_MESSAGE)

    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration; the unique index decides.
        db.rollback()
        raise ConflictError(USER_EXISTS_MESSAGE) from e
    db.refresh(user)
    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return _issue(user)


def login(db: Session, email: str, password: str) -> AuthResponse:
    """Authenticate by email and password; raises AuthError on any mismatch."""
    email = (email or "").strip().lower()
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = db.query(User).filter(User.email == email).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Failed login attempt")
        raise AuthError(INVALID_CREDENTIALS_MESSAGE)
    return _issue(user)


def get_profile(db: Session, user_id: int) -> UserPublic:
    """Return the public fields of the given user."""
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserPublic.model_validate(user)
