from sqlalchemy import func, select

from cinema_backend.models import Category, Cinema, Movie, Reservation, Room, Sceance
from cinema_backend.scripts.seed_data import seed


async def count(session, model):
    return await session.scalar(select(func.count()).select_from(model))


async def test_seed_inserts_sample_data_once(db_session_factory):
    assert await seed(db_session_factory) is True

    async with db_session_factory() as session:
        assert await count(session, Category) == 3
        assert await count(session, Movie) == 2
        assert await count(session, Cinema) == 1
        assert await count(session, Room) == 2
        assert await count(session, Sceance) == 3
        assert await count(session, Reservation) == 1

    assert await seed(db_session_factory) is False
    async with db_session_factory() as session:
        assert await count(session, Movie) == 2


async def test_seeded_data_is_served(db_session_factory, client):
    await seed(db_session_factory)

    movies = (await client.get("/movie")).json()
    assert [movie["name"] for movie in movies] == ["Interstellar", "Spirited Away"]
    assert [category["name"] for category in movies[0]["categories"]] == ["Science fiction", "Drama"]
