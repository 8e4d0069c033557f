import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

import cinema_backend.models  # noqa: F401
from cinema_backend.app import create_app
from cinema_backend.db.base import Base
from cinema_backend.db.session import enable_sqlite_foreign_keys, getDB_session


@pytest.fixture
async def db_engine(tmp_path):
    """Create a throwaway SQLite database for one test.

    Function-scoped to ensure it's created in the same event loop as the test.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'cinema_test.db'}",
        echo=False,
        future=True
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine):
    return async_sessionmaker(
        bind=db_engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False
    )


@pytest.fixture
async def db_session(db_session_factory):
    async with db_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(db_session_factory):
    """HTTP client talking to the app, one DB session per request as in production."""
    app = create_app()

    async def override_session():
        async with db_session_factory() as session:
            yield session
            await session.rollback()

    app.dependency_overrides[getDB_session] = override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def movie(client):
    response = await client.post("/movie", json={
        "name": "Test Movie",
        "description": "A test movie for testing",
        "release_date": "2020-05-01T00:00:00Z",
        "rate": 7,
    })
    assert response.status_code == 201
    return response.json()["movie"]


@pytest.fixture
async def cinema(client):
    response = await client.post("/cinema", json={"name": "Test Cinema", "city": "Test City"})
    assert response.status_code == 201
    return response.json()["cinema"]


@pytest.fixture
async def room(client, cinema):
    response = await client.post(f"/cinema/{cinema['uid']}/rooms", json={"name": "Room 1", "capacity": 50})
    assert response.status_code == 201
    return response.json()["room"]
