"""Owner-scoped CRUD for aircraft records."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from aione.core.errors import ConflictError, NotFoundError, ValidationError
from aione.models import Aircraft, Presentation
from aione.models.aircraft import DEFAULT_AIRCRAFT_STATUS
from aione.schemas.aircraft import AircraftCreate, AircraftRead, AircraftUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("tail_number", "model", "manufacturer")
DUPLICATE_TAIL_MESSAGE = "Aircraft with this tail number already exists"
NOT_FOUND_MESSAGE = "Aircraft not found"


def _normalize_tail_number(value: str) -> str:
    return value.strip().upper()


def _tail_number_taken(db: Session, tail_number: str, exclude_id: int | None = None) -> bool:
    query = db.query(Aircraft.id).filter(Aircraft.tail_number == tail_number)
    if exclude_id is not None:
        query = query.filter(Aircraft.id != exclude_id)
    return query.first() is not None


def _commit(db: Session) -> None:
    """Commit; a tail-number unique violation becomes ConflictError, other integrity errors propagate."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        # sqlite names the column, PostgreSQL the index and key; both mention tail_number.
        if "tail_number" in str(e.orig):
            raise ConflictError(DUPLICATE_TAIL_MESSAGE) from e
        raise


def _get_owned(db: Session, aircraft_id: int, owner_id: int) -> Aircraft:
    aircraft = (
        db.query(Aircraft)
        .filter(Aircraft.id == aircraft_id, Aircraft.owner_id == owner_id)
        .first()
    )
    if aircraft is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return aircraft


def list_aircraft(db: Session, owner_id: int) -> list[AircraftRead]:
    """Aircraft owned by owner_id, newest first."""
    rows = (
        db.query(Aircraft)
        .filter(Aircraft.owner_id == owner_id)
        .order_by(Aircraft.created_at.desc(), Aircraft.id.desc())
        .all()
    )
    return [AircraftRead.model_validate(a) for a in rows]


def create_aircraft(db: Session, body: AircraftCreate, owner_id: int) -> AircraftRead:
    """
    Persist a new aircraft owned by owner_id.

    status defaults to 'active' and specifications to an empty object.
    Raises ValidationError for blank required fields and ConflictError for a
    tail number that is already registered.
    """
    missing = [f for f in REQUIRED_FIELDS if not getattr(body, f).strip()]
    if missing:
        raise ValidationError(
            "Please provide all required fields: tailNumber, model, manufacturer, year"
        )
    tail_number = _normalize_tail_number(body.tail_number)
    if _tail_number_taken(db, tail_number):
        raise ConflictError(DUPLICATE_TAIL_MESSAGE)

    aircraft = Aircraft(
        tail_number=tail_number,
        model=body.model.strip(),
        manufacturer=body.manufacturer.strip(),
        year=body.year,
        status=(body.status or "").strip() or DEFAULT_AIRCRAFT_STATUS,
        specifications=body.specifications or {},
        owner_id=owner_id,
    )
    db.add(aircraft)
    _commit(db)
    db.refresh(aircraft)
    logger.info("Created aircraft id=%s tail_number=%s owner_id=%s", aircraft.id, tail_number, owner_id)
    return AircraftRead.model_validate(aircraft)


def update_aircraft(
    db: Session, aircraft_id: int, body: AircraftUpdate, owner_id: int
) -> AircraftRead:
    """Merge the provided fields into an aircraft owned by owner_id."""
    aircraft = _get_owned(db, aircraft_id, owner_id)
    changes = body.model_dump(exclude_unset=True)

    for field in ("tail_number", "model", "manufacturer", "status"):
        if field not in changes:
            continue
        value = (changes[field] or "").strip()
        if not value:
            raise ValidationError(f"{field} must not be empty")
        changes[field] = value
    if "year" in changes and changes["year"] is None:
        raise ValidationError("year must not be empty")
    if "specifications" in changes and changes["specifications"] is None:
        changes["specifications"] = {}

    if "tail_number" in changes:
        changes["tail_number"] = _normalize_tail_number(changes["tail_number"])
        if _tail_number_taken(db, changes["tail_number"], exclude_id=aircraft.id):
            raise ConflictError(DUPLICATE_TAIL_MESSAGE)

    for field, value in changes.items():
        setattr(aircraft, field, value)
    _commit(db)
    db.refresh(aircraft)
    return AircraftRead.model_validate(aircraft)


def delete_aircraft(db: Session, aircraft_id: int, owner_id: int) -> None:
    """Delete an aircraft owned by owner_id. Refuses while presentations reference it."""
    aircraft = _get_owned(db, aircraft_id, owner_id)
    in_use = (
        db.query(Presentation.id)
        .filter(Presentation.aircraft_id == aircraft.id)
        .first()
    )
    if in_use is not None:
        raise ConflictError("Aircraft is referenced by one or more presentations")
    db.delete(aircraft)
    db.commit()
    logger.info("Deleted aircraft id=%s owner_id=%s", aircraft_id, owner_id)
