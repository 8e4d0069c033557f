from typing import Optional
from uuid import UUID
from pydantic import BaseModel


class CinemaBase(BaseModel):
    name: Optional[str] = None
    city: Optional[str] = None


class CinemaPayload(CinemaBase):
    pass


class CinemaResponse(CinemaBase):
    uid: UUID

    class Config:
        from_attributes = True
