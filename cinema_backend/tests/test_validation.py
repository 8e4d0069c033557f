from datetime import datetime, timedelta, timezone

import pytest

from cinema_backend.core.exceptions import ValidationFailedError
from cinema_backend.core.validation import (ensure_valid, validate_category, validate_movie,
                                            validate_reservation, validate_room, validate_sceance)
from cinema_backend.models import Category, Movie, Reservation, Room, Sceance

NOW = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_movie_violations():
    movie = Movie(name="", description="ok", release_date=None, rate=-1, image="x" * 256)
    assert validate_movie(movie) == [
        ("name", "is required"),
        ("release_date", "is required"),
        ("rate", "must be between 0 and 10"),
        ("image", "must be at most 255 characters"),
    ]


def test_valid_movie():
    movie = Movie(name="Alien", description="In space no one can hear you scream.", release_date=NOW)
    assert validate_movie(movie) == []


def test_category_and_room():
    assert validate_category(Category(name=None)) == [("name", "is required")]
    assert validate_room(Room(name="Room", capacity=0)) == [("capacity", "must be at least 1")]
    assert validate_room(Room(name="Room")) == []


def test_sceance_date_checked_only_when_set():
    sceance = Sceance(movie_id=1, date=NOW - timedelta(minutes=1))
    assert validate_sceance(sceance, changed={"date"}, now=NOW)[0][0] == "date"
    assert validate_sceance(sceance, changed={"movie_id"}, now=NOW) == []
    assert validate_sceance(Sceance(movie_id=1, date=NOW), changed={"date"}, now=NOW) == []


def test_naive_sceance_dates_are_read_as_utc():
    naive = datetime(2030, 1, 1, 11, 0)
    assert validate_sceance(Sceance(movie_id=1, date=naive), changed={"date"}, now=NOW) != []


def test_reservation_violations():
    reservation = Reservation(name="Jane", email="not-an-email", seats=0)
    assert validate_reservation(reservation) == [
        ("email", "must be a valid email address"),
        ("seats", "must be at least 1"),
    ]


def test_ensure_valid_raises_with_first_violation():
    with pytest.raises(ValidationFailedError) as exc_info:
        ensure_valid("reservation", [("name", "is required"), ("seats", "must be at least 1")])
    error = exc_info.value
    assert error.status_code == 422
    assert error.message == "Invalid reservation payload: field 'name' is required"
    assert len(error.to_body()["violations"]) == 2

    ensure_valid("reservation", [])


def test_control_characters_in_text():
    assert validate_category(Category(name="Dra\u0000ma")) == [("name", "contains characters that are not allowed")]
    movie = Movie(name="Alien", description="tab\tand\nnewline are fine", release_date=NOW, image="a\x1bb")
    assert validate_movie(movie) == [("image", "contains characters that are not allowed")]
