from datetime import datetime, timezone
from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False
    )


from .Movie import Movie, Category, movie_category
from .Cinema import Cinema, Room
from .Sceance import Sceance
from .reservation import Reservation

__all__ = ["TimestampMixin", "Movie", "Category", "movie_category",
           "Cinema", "Room", "Sceance", "Reservation"]
