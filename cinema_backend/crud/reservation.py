import logging
from typing import Set
from uuid import UUID
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import select

from cinema_backend.core.validation import ensure_valid, validate_reservation
from cinema_backend.crud.base import commit, paginate, populate
from cinema_backend.models.Sceance import Sceance
from cinema_backend.models.reservation import Reservation
from cinema_backend.schemas.reservation import ReservationCreate, ReservationUpdate


logger = logging.getLogger(__name__)


class CRUDReservation:
    async def get_reservation(self, db: AsyncSession, reservation_uid: UUID) -> Reservation | None:
        result = await db.execute(select(Reservation).where(Reservation.uid == reservation_uid))
        return result.scalar_one_or_none()

    async def get_reservations(self, db: AsyncSession, page: int, page_size: int):
        return await paginate(db,
                              select(Reservation).order_by(Reservation.created_at, Reservation.uid),
                              page, page_size)

    async def _apply(self, db: AsyncSession, reservation: Reservation, data: BaseModel) -> None:
        changed: Set[str] = populate(reservation, data)
        violations = validate_reservation(reservation)
        if reservation.sceance_uid is not None and "sceance_uid" in changed:
            if await db.get(Sceance, reservation.sceance_uid) is None:
                violations.append(("sceance_uid", f"references unknown sceance {reservation.sceance_uid}"))
        ensure_valid("reservation", violations)

    async def create_reservation(self, db: AsyncSession, data: ReservationCreate) -> Reservation:
        reservation = Reservation(seats=1)
        await self._apply(db, reservation, data)
        db.add(reservation)
        await commit(db, "create reservation")
        logger.info(f"Created reservation {reservation.uid}")
        return reservation

    async def update_reservation(self, db: AsyncSession, reservation_uid: UUID,
                                 data: ReservationUpdate) -> Reservation | None:
        reservation = await self.get_reservation(db, reservation_uid)
        if reservation is None:
            return None
        await self._apply(db, reservation, data)
        await commit(db, f"update reservation {reservation_uid}")
        logger.info(f"Updated reservation {reservation_uid}")
        return reservation

    async def delete_reservation(self, db: AsyncSession, reservation_uid: UUID) -> bool:
        reservation = await self.get_reservation(db, reservation_uid)
        if reservation is None:
            return False
        await db.delete(reservation)
        await commit(db, f"delete reservation {reservation_uid}")
        logger.info(f"Deleted reservation {reservation_uid}")
        return True


crud_reservation = CRUDReservation()
