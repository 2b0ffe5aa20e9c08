"""User listing (admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from aione.api.routes.auth import require_admin
from aione.core.database import get_db
from aione.schemas.auth import CurrentUser, UsersListResponse
from aione.services.users import list_users

router = APIRouter()


@router.get("", response_model=UsersListResponse)
def get_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UsersListResponse:
    """List all users (admin only)."""
    return UsersListResponse(data=list_users(db))
