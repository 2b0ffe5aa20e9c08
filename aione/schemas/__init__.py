"""Pydantic request/response schemas."""

from aione.schemas.aircraft import (
    AircraftCreate,
    AircraftListResponse,
    AircraftRead,
    AircraftResponse,
    AircraftUpdate,
)
from aione.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    UserPublic,
    UserResponse,
    UsersListResponse,
)
from aione.schemas.common import ErrorResponse, MessageResponse
from aione.schemas.health import HealthResponse
from aione.schemas.presentation import (
    PresentationCreate,
    PresentationListResponse,
    PresentationRead,
    PresentationResponse,
    PresentationUpdate,
)

__all__ = [
    "AircraftCreate",
    "AircraftListResponse",
    "AircraftRead",
    "AircraftResponse",
    "AircraftUpdate",
    "AuthResponse",
    "CurrentUser",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "PresentationCreate",
    "PresentationListResponse",
    "PresentationRead",
    "PresentationResponse",
    "PresentationUpdate",
    "RegisterRequest",
    "UserPublic",
    "UserResponse",
    "UsersListResponse",
]
