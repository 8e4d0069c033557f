from typing import Optional
from pydantic import BaseModel

from cinema_backend.schemas.category import CategoryResponse
from cinema_backend.schemas.common import Int4, UTCDateTime


class MovieBase(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[UTCDateTime] = None
    rate: Optional[Int4] = None
    image: Optional[str] = None


class MoviePayload(MovieBase):
    # ids of the categories the movie belongs to
    categories: Optional[list[Int4]] = None


class MovieResponse(MovieBase):
    id: int
    categories: list[CategoryResponse] = []

    class Config:
        from_attributes = True  # orm_mode
