"""Presentation endpoints. Any authenticated user may schedule, edit or cancel."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from aione.api.routes.auth import get_current_user
from aione.core.database import get_db
from aione.schemas.auth import CurrentUser
from aione.schemas.common import MessageResponse
from aione.schemas.presentation import (
    PresentationCreate,
    PresentationListResponse,
    PresentationResponse,
    PresentationUpdate,
)
from aione.services import presentations as presentation_service

router = APIRouter()


@router.get("", response_model=PresentationListResponse)
def list_presentations(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PresentationListResponse:
    """All presentations with aircraft, presenter and attendees resolved."""
    return PresentationListResponse(data=presentation_service.list_presentations(db))


@router.post("", response_model=PresentationResponse, status_code=status.HTTP_201_CREATED)
def create_presentation(
    body: PresentationCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PresentationResponse:
    """
    Schedule a presentation with the caller as presenter.

    Required: title, scheduledDate, duration (minutes), aircraftId.
    Optional: description, attendeeIds, status (default "scheduled").
    """
    return PresentationResponse(
        data=presentation_service.create_presentation(db, body, presenter_id=user.id)
    )


@router.put("/{presentation_id}", response_model=PresentationResponse)
def update_presentation(
    presentation_id: int,
    body: PresentationUpdate,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PresentationResponse:
    return PresentationResponse(
        data=presentation_service.update_presentation(db, presentation_id, body)
    )


@router.delete("/{presentation_id}", response_model=MessageResponse)
def delete_presentation(
    presentation_id: int,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    presentation_service.delete_presentation(db, presentation_id)
    return MessageResponse(message="Presentation deleted successfully")
