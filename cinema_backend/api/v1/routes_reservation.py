from uuid import UUID
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_backend.api.v1.pagination import PageParams
from cinema_backend.core.exceptions import NotFoundError
from cinema_backend.core.serialization import api_response, entity_response, list_response
from cinema_backend.crud.reservation import crud_reservation
from cinema_backend.db.session import getDB_session
from cinema_backend.schemas.reservation import ReservationCreate, ReservationUpdate

router = APIRouter(
    prefix="/reservation",
    tags=["reservation"]
)


@router.get("")
async def list_reservations(request: Request, paging: PageParams = Depends(),
                            db: AsyncSession = Depends(getDB_session)):
    reservations = await crud_reservation.get_reservations(db, paging.page, paging.page_size)
    return list_response(request, "reservation", reservations)


@router.get("/{uid}")
async def get_reservation(uid: UUID, request: Request, db: AsyncSession = Depends(getDB_session)):
    reservation = await crud_reservation.get_reservation(db, uid)
    if reservation is None:
        raise NotFoundError("Reservation")
    return entity_response(request, "reservation", reservation)


@router.post("")
async def create_reservation(reservation: ReservationCreate, request: Request,
                             db: AsyncSession = Depends(getDB_session)):
    created = await crud_reservation.create_reservation(db, reservation)
    return entity_response(request, "reservation", created, 201, "Reservation created successfully")


@router.put("/{uid}")
async def update_reservation(uid: UUID, reservation: ReservationUpdate, request: Request,
                             db: AsyncSession = Depends(getDB_session)):
    result = await crud_reservation.update_reservation(db, uid, reservation)
    if result is None:
        raise NotFoundError("Reservation")
    return entity_response(request, "reservation", result, message="Reservation updated successfully")


@router.delete("/{uid}")
async def delete_reservation(uid: UUID, request: Request, db: AsyncSession = Depends(getDB_session)):
    if not await crud_reservation.delete_reservation(db, uid):
        raise NotFoundError("Reservation")
    return api_response(request, {"message": "Reservation deleted successfully"})
