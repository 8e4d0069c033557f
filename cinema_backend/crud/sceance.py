import logging
from typing import Set
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import select

from cinema_backend.core.validation import ensure_valid, validate_sceance
from cinema_backend.crud.base import commit, paginate, populate
from cinema_backend.models.Cinema import Room
from cinema_backend.models.Movie import Movie
from cinema_backend.models.Sceance import Sceance
from cinema_backend.schemas.sceance import SceancePayload


logger = logging.getLogger(__name__)


class CRUDSceance:
    async def get_sceances_by_room(self, db: AsyncSession, room_uid: UUID, page: int, page_size: int):
        return await paginate(db,
                              select(Sceance)
                              .where(Sceance.room_uid == room_uid)
                              .order_by(Sceance.date, Sceance.uid),
                              page, page_size)

    async def get_room_sceance(self, db: AsyncSession, room_uid: UUID, sceance_uid: UUID) -> Sceance | None:
        result = await db.execute(select(Sceance).where(
            Sceance.room_uid == room_uid,
            Sceance.uid == sceance_uid
        ))
        return result.scalar_one_or_none()

    async def _check(self, db: AsyncSession, sceance: Sceance, changed: Set[str]) -> None:
        violations = validate_sceance(sceance, changed)
        if sceance.movie_id is not None and "movie_id" in changed:
            if await db.get(Movie, sceance.movie_id) is None:
                violations.append(("movie_id", f"references unknown movie {sceance.movie_id}"))
        ensure_valid("sceance", violations)

    async def create_sceance(self, db: AsyncSession, room: Room, data: SceancePayload) -> Sceance:
        sceance = Sceance(room_uid=room.uid)
        changed = populate(sceance, data)
        # a new sceance gets its date checked even when it is missing from the body
        await self._check(db, sceance, changed | {"date"})
        db.add(sceance)
        await commit(db, f"create sceance in room {room.uid}")
        logger.info(f"Created sceance {sceance.uid} in room {room.uid}")
        return sceance

    async def update_sceance(self, db: AsyncSession, sceance: Sceance, data: SceancePayload) -> Sceance:
        changed = populate(sceance, data)
        await self._check(db, sceance, changed)
        await commit(db, f"update sceance {sceance.uid}")
        logger.info(f"Updated sceance {sceance.uid}")
        return sceance

    async def delete_sceance(self, db: AsyncSession, sceance: Sceance) -> None:
        await db.delete(sceance)
        await commit(db, f"delete sceance {sceance.uid}")
        logger.info(f"Deleted sceance {sceance.uid} from room {sceance.room_uid}")


crud_sceance = CRUDSceance()
