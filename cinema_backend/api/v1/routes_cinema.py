from uuid import UUID
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_backend.api.v1.pagination import PageParams
from cinema_backend.core.exceptions import NotFoundError
from cinema_backend.core.serialization import api_response, entity_response, list_response
from cinema_backend.crud.cinema import crud_cinema
from cinema_backend.db.session import getDB_session
from cinema_backend.schemas.cinema import CinemaPayload

router = APIRouter(prefix="/cinema", tags=["cinema"])


@router.get("")
async def list_cinemas(
        request: Request,
        paging: PageParams = Depends(),
        db: AsyncSession = Depends(getDB_session)):
    cinemas = await crud_cinema.get_cinemas(db, paging.page, paging.page_size)
    return list_response(request, "cinema", cinemas)


@router.get("/{cinema_uid}")
async def get_cinema(
        cinema_uid: UUID,
        request: Request,
        db: AsyncSession = Depends(getDB_session)):
    cinema = await crud_cinema.get_cinema(db, cinema_uid)
    if cinema is None:
        raise NotFoundError("Cinema")
    return entity_response(request, "cinema", cinema)


@router.post("")
async def create_cinema(
        cinema: CinemaPayload,
        request: Request,
        db: AsyncSession = Depends(getDB_session)):
    created = await crud_cinema.create_cinema(db, cinema)
    return entity_response(request, "cinema", created, 201, "Cinema created successfully")


@router.put("/{cinema_uid}")
async def update_cinema(
        cinema_uid: UUID,
        cinema: CinemaPayload,
        request: Request,
        db: AsyncSession = Depends(getDB_session)):
    result = await crud_cinema.update_cinema(db=db, cinema_uid=cinema_uid, data=cinema)
    if result is None:
        raise NotFoundError("Cinema")
    return entity_response(request, "cinema", result, message="Cinema updated successfully")


@router.delete("/{cinema_uid}")
async def delete_cinema(
        cinema_uid: UUID,
        request: Request,
        db: AsyncSession = Depends(getDB_session)):
    if not await crud_cinema.delete_cinema(db, cinema_uid):
        raise NotFoundError("Cinema")
    return api_response(request, {"message": "Cinema deleted successfully"})
