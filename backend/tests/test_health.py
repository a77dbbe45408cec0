import pytest

from movie_api.core import database


@pytest.fixture
async def initialized_database():
    await database.init_database("sqlite+aiosqlite:///:memory:")
    yield
    await database.close_database()


async def test_health_reports_database(client, initialized_database):
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["services"]["database"]["checks"]["connectivity"] == "pass"


async def test_health_without_database(client):
    response = await client.get("/api/v1/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


async def test_api_info(client):
    response = await client.get("/api/v1/")

    assert response.json()["endpoints"]["movies"] == "/api/v1/movies"
