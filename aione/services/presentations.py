"""CRUD for scheduled presentations. Any authenticated user may modify any presentation."""

import logging

from sqlalchemy.orm import Session

from aione.core.errors import NotFoundError, ValidationError
from aione.models import Aircraft, Presentation, User
from aione.models.presentation import DEFAULT_PRESENTATION_STATUS
from aione.schemas.presentation import (
    PresentationCreate,
    PresentationRead,
    PresentationUpdate,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Presentation not found"


def _get(db: Session, presentation_id: int) -> Presentation:
    presentation = db.get(Presentation, presentation_id)
    if presentation is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return presentation


def _require_aircraft(db: Session, aircraft_id: int) -> Aircraft:
    aircraft = db.get(Aircraft, aircraft_id)
    if aircraft is None:
        raise NotFoundError("Aircraft not found")
    return aircraft


def _resolve_attendees(db: Session, attendee_ids: list[int]) -> list[User]:
    """Load attendee users, preserving the first occurrence of each id."""
    unique_ids = list(dict.fromkeys(attendee_ids))
    if not unique_ids:
        return []
    users = db.query(User).filter(User.id.in_(unique_ids)).all()
    found = {u.id for u in users}
    unknown = [i for i in unique_ids if i not in found]
    if unknown:
        raise ValidationError(
            f"Unknown attendee id(s): {', '.join(str(i) for i in unknown)}"
        )
    return users


def list_presentations(db: Session) -> list[PresentationRead]:
    """All presentations, soonest first."""
    rows = (
        db.query(Presentation)
        .order_by(Presentation.scheduled_date.asc(), Presentation.id.asc())
        .all()
    )
    return [PresentationRead.model_validate(p) for p in rows]


def create_presentation(
    db: Session, body: PresentationCreate, presenter_id: int
) -> PresentationRead:
    """
    Schedule a presentation presented by presenter_id.

    Raises ValidationError for a blank title or unknown attendees and
    NotFoundError when the referenced aircraft does not exist.
    """
    title = body.title.strip()
    if not title:
        raise ValidationError(
            "Please provide all required fields: title, scheduledDate, duration, aircraftId"
        )
    _require_aircraft(db, body.aircraft_id)
    attendees = _resolve_attendees(db, body.attendee_ids)

    presentation = Presentation(
        title=title,
        description=body.description,
        scheduled_date=body.scheduled_date,
        duration=body.duration,
        status=body.status or DEFAULT_PRESENTATION_STATUS,
        aircraft_id=body.aircraft_id,
        presenter_id=presenter_id,
        attendees=attendees,
    )
    db.add(presentation)
    db.commit()
    db.refresh(presentation)
    logger.info(
        "Created presentation id=%s aircraft_id=%s presenter_id=%s",
        presentation.id,
        presentation.aircraft_id,
        presenter_id,
    )
    return PresentationRead.model_validate(presentation)


def update_presentation(
    db: Session, presentation_id: int, body: PresentationUpdate
) -> PresentationRead:
    """Merge the provided fields; attendeeIds, when given, replaces the attendee list."""
    presentation = _get(db, presentation_id)
    changes = body.model_dump(exclude_unset=True)

    if "title" in changes:
        title = (changes.pop("title") or "").strip()
        if not title:
            raise ValidationError("title must not be empty")
        presentation.title = title
    for field in ("scheduled_date", "duration", "aircraft_id", "status"):
        if field in changes and changes[field] is None:
            raise ValidationError(f"{field} must not be empty")
    if "aircraft_id" in changes:
        _require_aircraft(db, changes["aircraft_id"])
    if "attendee_ids" in changes:
        presentation.attendees = _resolve_attendees(db, changes.pop("attendee_ids") or [])

    for field, value in changes.items():
        setattr(presentation, field, value)
    db.commit()
    db.refresh(presentation)
    return PresentationRead.model_validate(presentation)


def delete_presentation(db: Session, presentation_id: int) -> None:
    presentation = _get(db, presentation_id)
    db.delete(presentation)
    db.commit()
    logger.info("Deleted presentation id=%s", presentation_id)
