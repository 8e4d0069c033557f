from uuid import UUID
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_backend.api.v1.pagination import PageParams
from cinema_backend.core.exceptions import NotFoundError
from cinema_backend.core.serialization import api_response, entity_response, list_response
from cinema_backend.crud.room import crud_room
from cinema_backend.crud.sceance import crud_sceance
from cinema_backend.db.session import getDB_session
from cinema_backend.models.Cinema import Room
from cinema_backend.models.Sceance import Sceance
from cinema_backend.schemas.sceance import SceancePayload


router = APIRouter(tags=["sceance"])


async def _get_room(db: AsyncSession, room_uid: UUID) -> Room:
    room = await crud_room.get_room(db, room_uid)
    if room is None:
        raise NotFoundError("Room")
    return room


async def _get_cinema_room(db: AsyncSession, cinema_uid: UUID, room_uid: UUID) -> Room:
    room = await crud_room.get_cinema_room(db, cinema_uid, room_uid)
    if room is None:
        raise NotFoundError("Room")
    return room


async def _get_sceance(db: AsyncSession, room: Room, sceance_uid: UUID) -> Sceance:
    sceance = await crud_sceance.get_room_sceance(db, room.uid, sceance_uid)
    if sceance is None:
        raise NotFoundError("Sceance")
    return sceance


@router.get("/room/{room_uid}/sceances")
async def list_sceances(room_uid: UUID, request: Request, paging: PageParams = Depends(),
                        db: AsyncSession = Depends(getDB_session)):
    room = await _get_room(db, room_uid)
    sceances = await crud_sceance.get_sceances_by_room(db, room.uid, paging.page, paging.page_size)
    return list_response(request, "sceance", sceances)


@router.get("/room/{room_uid}/sceances/{uid}")
async def get_sceance(room_uid: UUID, uid: UUID, request: Request, db: AsyncSession = Depends(getDB_session)):
    room = await _get_room(db, room_uid)
    sceance = await _get_sceance(db, room, uid)
    return entity_response(request, "sceance", sceance)


@router.post("/cinema/{cinema_uid}/rooms/{room_uid}/sceances")
async def create_sceance(cinema_uid: UUID, room_uid: UUID, sceance: SceancePayload, request: Request,
                         db: AsyncSession = Depends(getDB_session)):
    room = await _get_cinema_room(db, cinema_uid, room_uid)
    created = await crud_sceance.create_sceance(db, room, sceance)
    return entity_response(request, "sceance", created, 201, "Sceance created successfully")


@router.put("/room/{room_uid}/sceances/{uid}")
async def update_sceance(room_uid: UUID, uid: UUID, sceance: SceancePayload, request: Request,
                         db: AsyncSession = Depends(getDB_session)):
    room = await _get_room(db, room_uid)
    existing = await _get_sceance(db, room, uid)
    updated = await crud_sceance.update_sceance(db, existing, sceance)
    return entity_response(request, "sceance", updated, message="Sceance updated successfully")


@router.delete("/cinema/{cinema_uid}/rooms/{room_uid}/sceances/{uid}")
@router.delete("/cinema{cinema_uid}/{room_uid}/sceances/{uid}", include_in_schema=False)
async def delete_sceance(cinema_uid: UUID, room_uid: UUID, uid: UUID, request: Request,
                         db: AsyncSession = Depends(getDB_session)):
    room = await _get_cinema_room(db, cinema_uid, room_uid)
    sceance = await _get_sceance(db, room, uid)
    await crud_sceance.delete_sceance(db, sceance)
    return api_response(request, {"message": "Sceance deleted successfully"})
