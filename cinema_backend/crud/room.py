import logging
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import select

from cinema_backend.core.validation import ensure_valid, validate_room
from cinema_backend.crud.base import commit, paginate, populate
from cinema_backend.models.Cinema import Cinema, Room
from cinema_backend.schemas.room import RoomPayload


logger = logging.getLogger(__name__)


class CRUDRoom:
    async def get_room(self, db: AsyncSession, room_uid: UUID) -> Room | None:
        result = await db.execute(select(Room).where(Room.uid == room_uid))
        return result.scalar_one_or_none()

    async def get_cinema_room(self, db: AsyncSession, cinema_uid: UUID, room_uid: UUID) -> Room | None:
        result = await db.execute(select(Room).where(
            Room.cinema_uid == cinema_uid,
            Room.uid == room_uid
        ))
        return result.scalar_one_or_none()

    async def get_rooms_by_cinema(self, db: AsyncSession, cinema_uid: UUID, page: int, page_size: int):
        return await paginate(db,
                              select(Room)
                              .where(Room.cinema_uid == cinema_uid)
                              .order_by(Room.created_at, Room.uid),
                              page, page_size)

    async def create_room(self, db: AsyncSession, cinema: Cinema, data: RoomPayload) -> Room:
        room = Room(cinema_uid=cinema.uid)
        populate(room, data)
        ensure_valid("room", validate_room(room))
        db.add(room)
        await commit(db, f"create room in cinema {cinema.uid}")
        logger.info(f"Created room {room.uid} in cinema {cinema.uid}")
        return room

    async def update_room(self, db: AsyncSession, room: Room, data: RoomPayload) -> Room:
        populate(room, data)
        ensure_valid("room", validate_room(room))
        await commit(db, f"update room {room.uid}")
        logger.info(f"Updated room {room.uid}")
        return room

    async def delete_room(self, db: AsyncSession, room: Room) -> None:
        await db.delete(room)
        await commit(db, f"delete room {room.uid}")
        logger.info(f"Deleted room {room.uid}")


crud_room = CRUDRoom()
