"""API routes."""

from typing import Any

from fastapi import APIRouter

from aione.api.routes import aircraft, auth, health, presentations, users
from aione.schemas.common import ErrorResponse

# Every failure is rendered as {"error": ...}; documented for the OpenAPI schema.
_ERRORS: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid input or conflict"},
    500: {"model": ErrorResponse, "description": "Internal or database error"},
}
_PROTECTED_ERRORS: dict[int | str, dict[str, Any]] = {
    **_ERRORS,
    401: {"model": ErrorResponse, "description": "Access token required"},
    403: {"model": ErrorResponse, "description": "Invalid or expired token, or insufficient role"},
    404: {"model": ErrorResponse, "description": "Record not found"},
}

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"], responses=_PROTECTED_ERRORS)
router.include_router(
    aircraft.router, prefix="/aircraft", tags=["aircraft"], responses=_PROTECTED_ERRORS
)
router.include_router(
    presentations.router,
    prefix="/presentations",
    tags=["presentations"],
    responses=_PROTECTED_ERRORS,
)
router.include_router(users.router, prefix="/users", tags=["users"], responses=_PROTECTED_ERRORS)
