import uuid
from datetime import datetime
from sqlalchemy import DateTime, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from cinema_backend.db.base import Base
from cinema_backend.models import TimestampMixin


class Sceance(Base, TimestampMixin):
    uid: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    movie_id: Mapped[int] = mapped_column(Integer, ForeignKey(
        "movie.id", ondelete="CASCADE"), index=True, nullable=False)
    room_uid: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey(
        "room.uid", ondelete="CASCADE"), index=True, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
