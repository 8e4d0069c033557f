from typing import Optional
from uuid import UUID
from pydantic import BaseModel

from cinema_backend.schemas.common import Int4, UTCDateTime


class SceanceBase(BaseModel):
    movie_id: Optional[Int4] = None
    date: Optional[UTCDateTime] = None


class SceancePayload(SceanceBase):
    pass


class SceanceResponse(SceanceBase):
    uid: UUID
    room_uid: UUID
    created_at: UTCDateTime
    updated_at: UTCDateTime

    class Config:
        from_attributes = True  # orm_mode
