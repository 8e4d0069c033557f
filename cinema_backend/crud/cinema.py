import logging
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import select

from cinema_backend.core.validation import ensure_valid, validate_cinema
from cinema_backend.crud.base import commit, paginate, populate
from cinema_backend.models.Cinema import Cinema
from cinema_backend.schemas.cinema import CinemaPayload


logger = logging.getLogger(__name__)


class CRUDCinema:
    async def get_cinema(self, db: AsyncSession, cinema_uid: UUID) -> Cinema | None:
        result = await db.execute(select(Cinema).where(Cinema.uid == cinema_uid))
        return result.scalar_one_or_none()

    async def get_cinemas(self, db: AsyncSession, page: int, page_size: int):
        return await paginate(db,
                              select(Cinema).order_by(Cinema.created_at, Cinema.uid),
                              page, page_size)

    async def create_cinema(self, db: AsyncSession, data: CinemaPayload) -> Cinema:
        cinema = Cinema()
        populate(cinema, data)
        ensure_valid("cinema", validate_cinema(cinema))
        db.add(cinema)
        await commit(db, "create cinema")
        logger.info(f"Created cinema {cinema.uid}")
        return cinema

    async def update_cinema(self, db: AsyncSession, cinema_uid: UUID, data: CinemaPayload) -> Cinema | None:
        cinema = await self.get_cinema(db, cinema_uid)
        if cinema is None:
            return None
        populate(cinema, data)
        ensure_valid("cinema", validate_cinema(cinema))
        await commit(db, f"update cinema {cinema_uid}")
        logger.info(f"Updated cinema {cinema_uid}")
        return cinema

    async def delete_cinema(self, db: AsyncSession, cinema_uid: UUID) -> bool:
        cinema = await self.get_cinema(db, cinema_uid)
        if cinema is None:
            return False
        # rooms, and their sceances, follow through ON DELETE CASCADE
        await db.delete(cinema)
        await commit(db, f"delete cinema {cinema_uid}")
        logger.info(f"Deleted cinema {cinema_uid}")
        return True


crud_cinema = CRUDCinema()
