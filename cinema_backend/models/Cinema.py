import uuid
from typing import Optional
from sqlalchemy import ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from cinema_backend.db.base import Base
from cinema_backend.models import TimestampMixin


class Cinema(Base, TimestampMixin):
    uid: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class Room(Base, TimestampMixin):
    uid: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    cinema_uid: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("cinema.uid", ondelete="CASCADE"), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    capacity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
