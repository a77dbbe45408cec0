import os
import tempfile

# Settings are read at import time, so the test environment goes first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="movie_api_uploads_"))
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from movie_api.core.database import create_database_engine, create_session_factory, get_db
from movie_api.main import app
from movie_api.models import Base, Movie, Person


@pytest.fixture
async def db_engine():
    """In-memory database, created fresh for every test"""
    engine = create_database_engine("sqlite+aiosqlite:///:memory:")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest.fixture
async def db_session(db_session_factory):
    async with db_session_factory() as session:
        yield session


@pytest.fixture
async def people(db_session):
    """Three people: ids 1, 2 and 3"""
    seeded = [
        Person(name="Ada Actor", date_of_birth=date(1970, 1, 1)),
        Person(name="Ben Actor", date_of_birth=date(1980, 2, 2)),
        Person(name="Cleo Actress", date_of_birth=date(1990, 3, 3)),
    ]
    db_session.add_all(seeded)
    await db_session.commit()
    return seeded


@pytest.fixture
async def movie_factory(db_session):
    async def create(title="Test Movie", actors=()):
        movie = Movie(
            title=title,
            description="A movie for testing",
            language="English",
            release_date=date(2020, 5, 17),
            cover_image=None,
        )
        movie.actors = list(actors)
        db_session.add(movie)
        await db_session.commit()
        await db_session.refresh(movie)
        return movie

    return create


@pytest.fixture
def commit_spy(db_session, monkeypatch):
    """Count commits issued through the test session"""
    calls = []
    original_commit = db_session.commit

    async def spy():
        calls.append(1)
        await original_commit()

    monkeypatch.setattr(db_session, "commit", spy)
    return calls


@pytest.fixture
async def client(db_session_factory):
    async def override_get_db():
        async with db_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
