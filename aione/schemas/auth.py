"""Request/response schemas for auth and user endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from aione.schemas.common import ApiModel

Role = Literal["admin", "manager", "viewer"]


class RegisterRequest(ApiModel):
    """Registration body. Blank values and password length are checked by the auth service."""

    username: str = Field(..., max_length=255, description="Unique username")
    email: str = Field(..., max_length=255, description="Unique email address")
    password: str = Field(..., description="Password (6-128 chars)")
    role: str | None = Field(default=None, description="admin, manager or viewer (default viewer)")


class LoginRequest(ApiModel):
    """Credentials for login."""

    email: str = Field(..., description="Email address used at registration")
    password: str = Field(..., description="Password")


class CurrentUser(BaseModel):
    """Identity decoded from a valid bearer token, passed to protected handlers."""

    id: int
    username: str
    role: str


class UserPublic(ApiModel):
    """User fields safe to return to clients (no password hash)."""

    id: int
    username: str
    email: str
    role: Role
    created_at: datetime


class UserSummary(ApiModel):
    """Compact user reference embedded in aircraft and presentation records."""

    id: int
    username: str
    email: str
    role: Role


class AuthResponse(BaseModel):
    """Bearer token plus the authenticated user, returned by register and login."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")
    user: UserPublic


class UserResponse(BaseModel):
    """Response for GET /auth/profile."""

    data: UserPublic


class UsersListResponse(BaseModel):
    """Response for GET /users (admin only)."""

    data: list[UserPublic]
