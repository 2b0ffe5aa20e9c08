"""Request/response schemas for presentation endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import AwareDatetime, BaseModel, Field

from aione.schemas.aircraft import AircraftSummary
from aione.schemas.auth import UserSummary
from aione.schemas.common import ApiModel

PresentationStatus = Literal["scheduled", "in-progress", "completed", "cancelled"]


class PresentationCreate(ApiModel):
    """Body for POST /presentations. The presenter is always the caller."""

    title: str = Field(..., max_length=255)
    description: str | None = None
    scheduled_date: AwareDatetime = Field(..., description="ISO-8601 with a UTC offset, e.g. 2026-11-01T10:00:00Z")
    duration: int = Field(..., gt=0, description="Duration in minutes")
    aircraft_id: int
    attendee_ids: list[int] = Field(default_factory=list)
    status: PresentationStatus | None = None


class PresentationUpdate(ApiModel):
    """Body for PUT /presentations/{id}. Only provided fields are changed."""

    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    scheduled_date: AwareDatetime | None = None
    duration: int | None = Field(default=None, gt=0)
    aircraft_id: int | None = None
    attendee_ids: list[int] | None = None
    status: PresentationStatus | None = None


class PresentationRead(ApiModel):
    """Presentation with aircraft, presenter and attendees resolved."""

    id: int
    title: str
    description: str | None
    scheduled_date: datetime
    duration: int
    status: PresentationStatus
    aircraft: AircraftSummary
    presenter: UserSummary
    attendees: list[UserSummary]
    created_at: datetime
    updated_at: datetime


class PresentationResponse(BaseModel):
    data: PresentationRead


class PresentationListResponse(BaseModel):
    data: list[PresentationRead]
