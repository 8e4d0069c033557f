import uuid
from typing import Optional
from sqlalchemy import ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from cinema_backend.db.base import Base
from cinema_backend.models import TimestampMixin


class Reservation(Base, TimestampMixin):
    uid: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    seats: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    sceance_uid: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, ForeignKey(
        "sceance.uid", ondelete="SET NULL"), index=True, nullable=True)
