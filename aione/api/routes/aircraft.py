"""Aircraft endpoints: list, create, update and delete the caller's aircraft."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from aione.api.routes.auth import get_current_user
from aione.core.database import get_db
from aione.schemas.aircraft import (
    AircraftCreate,
    AircraftListResponse,
    AircraftResponse,
    AircraftUpdate,
)
from aione.schemas.auth import CurrentUser
from aione.schemas.common import MessageResponse
from aione.services import aircraft as aircraft_service

router = APIRouter()


@router.get("", response_model=AircraftListResponse)
def list_aircraft(
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> AircraftListResponse:
    """Aircraft owned by the caller, newest first, each with its owner resolved."""
    return AircraftListResponse(data=aircraft_service.list_aircraft(db, owner_id=user.id))


@router.post("", response_model=AircraftResponse, status_code=status.HTTP_201_CREATED)
def create_aircraft(
    body: AircraftCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> AircraftResponse:
    """
    Register an aircraft owned by the caller.

    Required: tailNumber, model, manufacturer, year. status defaults to
    "active" and specifications to {}. Tail numbers are unique system-wide.
    """
    return AircraftResponse(data=aircraft_service.create_aircraft(db, body, owner_id=user.id))


@router.put("/{aircraft_id}", response_model=AircraftResponse)
def update_aircraft(
    aircraft_id: int,
    body: AircraftUpdate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> AircraftResponse:
    """Update provided fields of one of the caller's aircraft; 404 if not found or not owned."""
    return AircraftResponse(
        data=aircraft_service.update_aircraft(db, aircraft_id, body, owner_id=user.id)
    )


@router.delete("/{aircraft_id}", response_model=MessageResponse)
def delete_aircraft(
    aircraft_id: int,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    aircraft_service.delete_aircraft(db, aircraft_id, owner_id=user.id)
    return MessageResponse(message="Aircraft deleted successfully")
