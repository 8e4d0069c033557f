from typing import Optional
from uuid import UUID
from pydantic import BaseModel

from cinema_backend.schemas.common import Int4


class RoomBase(BaseModel):
    name: Optional[str] = None
    capacity: Optional[Int4] = None


class RoomPayload(RoomBase):
    pass


class RoomResponse(RoomBase):
    uid: UUID
    cinema_uid: UUID

    class Config:
        from_attributes = True  # Previously orm_mode
