"""Request/response schemas for aircraft endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from aione.schemas.auth import UserSummary
from aione.schemas.common import ApiModel

YEAR_MIN = 1900
YEAR_MAX = 2100


class AircraftCreate(ApiModel):
    """Body for POST /aircraft. Required: tailNumber, model, manufacturer, year."""

    tail_number: str = Field(..., max_length=32, description="Unique tail/serial number, e.g. N12345")
    model: str = Field(..., max_length=255)
    manufacturer: str = Field(..., max_length=255)
    year: int = Field(..., ge=YEAR_MIN, le=YEAR_MAX)
    status: str | None = Field(default=None, max_length=64, description="Defaults to 'active'")
    specifications: dict[str, Any] | None = Field(default=None, description="Free-form attributes")


class AircraftUpdate(ApiModel):
    """Body for PUT /aircraft/{id}. Only provided fields are changed."""

    tail_number: str | None = Field(default=None, max_length=32)
    model: str | None = Field(default=None, max_length=255)
    manufacturer: str | None = Field(default=None, max_length=255)
    year: int | None = Field(default=None, ge=YEAR_MIN, le=YEAR_MAX)
    status: str | None = Field(default=None, max_length=64)
    specifications: dict[str, Any] | None = None


class AircraftRead(ApiModel):
    """Aircraft record with its owner resolved."""

    id: int
    tail_number: str
    model: str
    manufacturer: str
    year: int
    status: str
    specifications: dict[str, Any]
    owner: UserSummary
    created_at: datetime
    updated_at: datetime


class AircraftSummary(ApiModel):
    """Compact aircraft reference embedded in presentations."""

    id: int
    tail_number: str
    model: str
    manufacturer: str


class AircraftResponse(BaseModel):
    data: AircraftRead


class AircraftListResponse(BaseModel):
    data: list[AircraftRead]
