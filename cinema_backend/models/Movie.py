from datetime import datetime
from typing import Optional
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from cinema_backend.db.base import Base
from cinema_backend.models import TimestampMixin


movie_category = Table(
    "movie_category",
    Base.metadata,
    Column("movie_id", Integer, ForeignKey("movie.id", ondelete="CASCADE"), primary_key=True, index=True),
    Column("category_id", Integer, ForeignKey("category.id", ondelete="CASCADE"), primary_key=True, index=True),
)


class Category(Base, TimestampMixin):
    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class Movie(Base, TimestampMixin):
    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    release_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    rate: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    # join rows go away with either side through the FK cascade
    categories: Mapped[list["Category"]] = relationship(
        secondary=movie_category, passive_deletes=True, order_by=Category.id)
