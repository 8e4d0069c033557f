from typing import Optional
from uuid import UUID
from pydantic import BaseModel

from cinema_backend.schemas.common import Int4


class ReservationBase(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    seats: Optional[Int4] = None
    sceance_uid: Optional[UUID] = None


class ReservationCreate(ReservationBase):
    pass


class ReservationUpdate(ReservationBase):
    # every edit has to restate the name
    name: str


class ReservationResponse(ReservationBase):
    uid: UUID

    class Config:
        from_attributes = True
