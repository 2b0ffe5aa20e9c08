"""Register, login and profile endpoints plus auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from aione.core.database import get_db
from aione.core.errors import AuthError
from aione.core.security import INVALID_TOKEN_MESSAGE, decode_access_token
from aione.models.user import User
from aione.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from aione.services import auth as auth_service

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT for an existing user and return that user.
    Raises 401 when no token is supplied and 403 when it is invalid, expired
    or names a user that no longer exists.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("Access token required", status_code=status.HTTP_401_UNAUTHORIZED)
    payload = decode_access_token(credentials.credentials)
    user = db.query(User).filter(User.id == int(payload["sub"])).first()
    if user is None:
        raise AuthError(INVALID_TOKEN_MESSAGE, status_code=status.HTTP_403_FORBIDDEN)
    return CurrentUser(id=user.id, username=user.username, role=user.role)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if current_user.role != "admin":
        raise AuthError("Admin access required", status_code=status.HTTP_403_FORBIDDEN)
    return current_user


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Create an account (role defaults to viewer) and return a JWT for it.
    Include the token in the Authorization header as: Bearer <token>
    """
    return auth_service.register(
        db,
        username=body.username,
        email=body.email,
        password=body.password,
        role=body.role,
    )


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Authenticate with email and password; returns a JWT access token."""
    return auth_service.login(db, email=body.email, password=body.password)


@router.get("/profile", response_model=UserResponse)
def profile(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Return the authenticated user's public fields."""
    return UserResponse(data=auth_service.get_profile(db, current_user.id))
