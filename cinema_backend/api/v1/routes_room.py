from uuid import UUID
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_backend.api.v1.pagination import PageParams
from cinema_backend.core.exceptions import NotFoundError
from cinema_backend.core.serialization import api_response, entity_response, list_response
from cinema_backend.crud.cinema import crud_cinema
from cinema_backend.crud.room import crud_room
from cinema_backend.db.session import getDB_session
from cinema_backend.models.Cinema import Cinema, Room
from cinema_backend.schemas.room import RoomPayload

router = APIRouter(
    prefix="/cinema/{cinema_uid}/rooms",
    tags=["room"]
)


async def _get_cinema(db: AsyncSession, cinema_uid: UUID) -> Cinema:
    cinema = await crud_cinema.get_cinema(db, cinema_uid)
    if cinema is None:
        raise NotFoundError("Cinema")
    return cinema


async def _get_room(db: AsyncSession, cinema_uid: UUID, room_uid: UUID) -> Room:
    await _get_cinema(db, cinema_uid)
    room = await crud_room.get_cinema_room(db, cinema_uid, room_uid)
    if room is None:
        raise NotFoundError("Room")
    return room


@router.get("")
async def list_rooms(cinema_uid: UUID, request: Request, paging: PageParams = Depends(),
                     db: AsyncSession = Depends(getDB_session)):
    await _get_cinema(db, cinema_uid)
    rooms = await crud_room.get_rooms_by_cinema(db, cinema_uid, paging.page, paging.page_size)
    return list_response(request, "room", rooms)


@router.get("/{room_uid}")
async def get_room(cinema_uid: UUID, room_uid: UUID, request: Request, db: AsyncSession = Depends(getDB_session)):
    room = await _get_room(db, cinema_uid, room_uid)
    return entity_response(request, "room", room)


@router.post("")
async def create_room(cinema_uid: UUID, room: RoomPayload, request: Request,
                      db: AsyncSession = Depends(getDB_session)):
    cinema = await _get_cinema(db, cinema_uid)
    created = await crud_room.create_room(db, cinema, room)
    return entity_response(request, "room", created, 201, "Room created successfully")


@router.put("/{room_uid}")
async def update_room(cinema_uid: UUID, room_uid: UUID, room: RoomPayload, request: Request,
                      db: AsyncSession = Depends(getDB_session)):
    existing = await _get_room(db, cinema_uid, room_uid)
    updated = await crud_room.update_room(db, existing, room)
    return entity_response(request, "room", updated, message="Room updated successfully")


@router.delete("/{room_uid}")
async def delete_room(cinema_uid: UUID, room_uid: UUID, request: Request, db: AsyncSession = Depends(getDB_session)):
    room = await _get_room(db, cinema_uid, room_uid)
    await crud_room.delete_room(db, room)
    return api_response(request, {"message": "Room deleted successfully"})
