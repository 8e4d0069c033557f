import asyncio
import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cinema_backend.db.session import async_session as AsyncSessionLocal, init_db
from cinema_backend.models import (
    Category,
    Cinema,
    Movie,
    Reservation,
    Room,
    Sceance,
)


logger = logging.getLogger(__name__)


async def seed(session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal) -> bool:
    """Insert sample data. Returns False when the database already holds movies."""
    async with session_factory() as session:
        existing = await session.scalar(select(func.count()).select_from(Movie))
        if existing:
            logger.info("Movies already present, skipping seed")
            return False

        # ------------------------------------------------------------------------------------
        # 1. Categories
        # ------------------------------------------------------------------------------------
        science_fiction = Category(name="Science fiction")
        drama = Category(name="Drama")
        animation = Category(name="Animation")
        session.add_all([science_fiction, drama, animation])
        await session.flush()

        # ------------------------------------------------------------------------------------
        # 2. Movies
        # ------------------------------------------------------------------------------------
        movie1 = Movie(
            name="Interstellar",
            description="A group of explorers travel through a wormhole in space.",
            release_date=datetime(2014, 11, 5, tzinfo=timezone.utc),
            rate=9,
            categories=[science_fiction, drama],
        )
        movie2 = Movie(
            name="Spirited Away",
            description="A girl wanders into a world ruled by gods and spirits.",
            release_date=datetime(2001, 7, 20, tzinfo=timezone.utc),
            rate=10,
            categories=[animation],
        )
        session.add_all([movie1, movie2])
        await session.flush()

        # ------------------------------------------------------------------------------------
        # 3. Cinema and rooms
        # ------------------------------------------------------------------------------------
        cinema = Cinema(name="Le Grand Rex", city="Paris")
        session.add(cinema)
        await session.flush()

        room1 = Room(cinema_uid=cinema.uid, name="Salle 1", capacity=120)
        room2 = Room(cinema_uid=cinema.uid, name="Salle 2", capacity=80)
        session.add_all([room1, room2])
        await session.flush()

        # ------------------------------------------------------------------------------------
        # 4. Upcoming sceances
        # ------------------------------------------------------------------------------------
        now = datetime.now(timezone.utc)
        sceance1 = Sceance(movie_id=movie1.id, room_uid=room1.uid, date=now + timedelta(days=1, hours=2))
        sceance2 = Sceance(movie_id=movie1.id, room_uid=room1.uid, date=now + timedelta(days=1, hours=6))
        sceance3 = Sceance(movie_id=movie2.id, room_uid=room2.uid, date=now + timedelta(days=2))
        session.add_all([sceance1, sceance2, sceance3])
        await session.flush()

        # ------------------------------------------------------------------------------------
        # 5. A reservation
        # ------------------------------------------------------------------------------------
        session.add(Reservation(name="Jane Doe", email="jane@example.com", seats=2, sceance_uid=sceance1.uid))

        await session.commit()
        logger.info("Sample data seeded successfully")
        return True


async def main():
    logging.basicConfig(level=logging.INFO)
    await init_db()
    await seed()


if __name__ == "__main__":
    asyncio.run(main())
