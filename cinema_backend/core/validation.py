"""Field constraints for every entity.

Each ``validate_*`` function inspects an entity after the request payload has
been merged into it and returns ``(field, violation)`` pairs, empty when the
entity can be persisted. :func:`ensure_valid` turns a non-empty list into a
:class:`ValidationFailedError`.
"""
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from cinema_backend.core.exceptions import ValidationFailedError, Violation
from cinema_backend.core.serialization import XML_ILLEGAL
from cinema_backend.models import Category, Cinema, Movie, Reservation, Room, Sceance
from cinema_backend.schemas.common import as_utc


MAX_RATE = 10


def _required_text(field: str, value: Optional[str], max_length: Optional[int] = None) -> List[Violation]:
    if value is None or not value.strip():
        return [(field, "is required")]
    return _optional_text(field, value, max_length)


def _optional_text(field: str, value: Optional[str], max_length: Optional[int] = None) -> List[Violation]:
    if value is None:
        return []
    if max_length is not None and len(value) > max_length:
        return [(field, f"must be at most {max_length} characters")]
    if XML_ILLEGAL.search(value):
        return [(field, "contains characters that are not allowed")]
    return []


def validate_movie(movie: Movie) -> List[Violation]:
    violations = _required_text("name", movie.name, 128)
    violations += _required_text("description", movie.description)
    if movie.release_date is None:
        violations.append(("release_date", "is required"))
    if movie.rate is not None and not 0 <= movie.rate <= MAX_RATE:
        violations.append(("rate", f"must be between 0 and {MAX_RATE}"))
    violations += _optional_text("image", movie.image, 255)
    return violations


def validate_category(category: Category) -> List[Violation]:
    return _required_text("name", category.name, 255)


def validate_cinema(cinema: Cinema) -> List[Violation]:
    return _required_text("name", cinema.name, 255) + _optional_text("city", cinema.city, 255)


def validate_room(room: Room) -> List[Violation]:
    violations = _required_text("name", room.name, 255)
    if room.capacity is not None and room.capacity < 1:
        violations.append(("capacity", "must be at least 1"))
    return violations


def validate_sceance(sceance: Sceance, changed: Iterable[str] = (), now: Optional[datetime] = None) -> List[Violation]:
    """Check a sceance; the date has to be upcoming only when it is being set."""
    violations: List[Violation] = []
    if sceance.movie_id is None:
        violations.append(("movie_id", "is required"))
    if sceance.date is None:
        violations.append(("date", "is required"))
    elif "date" in changed:
        now = now or datetime.now(timezone.utc)
        if as_utc(sceance.date) < now:
            violations.append(("date", "can't be in the past, you can't plan a sceance in the past"))
    return violations


def validate_reservation(reservation: Reservation) -> List[Violation]:
    violations = _required_text("name", reservation.name, 255)
    violations += _optional_text("email", reservation.email, 255)
    if reservation.email and "@" not in reservation.email:
        violations.append(("email", "must be a valid email address"))
    if reservation.seats is None or reservation.seats < 1:
        violations.append(("seats", "must be at least 1"))
    return violations


def ensure_valid(entity: str, violations: List[Violation]) -> None:
    if violations:
        raise ValidationFailedError(entity, violations)
