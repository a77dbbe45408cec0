import pytest

MOVIES_URL = "/api/v1/movies/"


def movie_body(actor_ids, **overrides):
    body = {
        "title": "Arrival",
        "description": "Linguist meets heptapods",
        "language": "English",
        "release_date": "2016-11-11",
        "cover_image": None,
        "actor_ids": actor_ids,
    }
    body.update(overrides)
    return body


@pytest.fixture
async def seeded_people(client):
    ids = []
    for name, born in [("Ada Actor", "1970-01-01"), ("Ben Actor", "1980-02-02"), ("Cleo Actress", "1990-03-03")]:
        response = await client.post("/api/v1/people/", json={"name": name, "date_of_birth": born})
        assert response.status_code == 201
        ids.append(response.json()["data"]["id"])
    return ids


async def test_create_movie(client, seeded_people):
    response = await client.post(MOVIES_URL, json=movie_body(seeded_people[:2]))

    assert response.status_code == 201
    body = response.json()
    assert body["status"] is True
    assert body["message"] == "Created successfully."
    assert body["data"]["title"] == "Arrival"
    assert [actor["name"] for actor in body["data"]["actors"]] == ["Ada Actor", "Ben Actor"]


async def test_create_movie_with_unknown_actor(client, seeded_people):
    response = await client.post(MOVIES_URL, json=movie_body([seeded_people[0], 999]))

    assert response.status_code == 400
    assert response.json() == {
        "status": False,
        "message": "Invalid Actors assigned",
        "data": {"missing_ids": [999]},
    }

    listing = await client.get(MOVIES_URL)
    assert listing.json()["data"]["total"] == 0


async def test_create_movie_missing_title(client):
    body = movie_body([])
    del body["title"]

    response = await client.post(MOVIES_URL, json=body)

    assert response.status_code == 422
    payload = response.json()
    assert payload["status"] is False
    assert payload["message"] == "Validation Failed"
    assert any(error["loc"][-1] == "title" for error in payload["data"])


async def test_update_movie_reconciles_cast(client, seeded_people):
    ada, ben, cleo = seeded_people
    created = await client.post(MOVIES_URL, json=movie_body([ada, ben]))
    movie_id = created.json()["data"]["id"]

    response = await client.put(f"{MOVIES_URL}{movie_id}", json=movie_body([ben, cleo], title="Arrival (2016)"))

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Updated successfully."
    assert body["data"]["title"] == "Arrival (2016)"
    assert [actor["id"] for actor in body["data"]["actors"]] == [ben, cleo]

    fetched = await client.get(f"{MOVIES_URL}{movie_id}")
    assert [actor["id"] for actor in fetched.json()["data"]["actors"]] == [ben, cleo]


async def test_update_movie_with_unknown_actor_keeps_cast(client, seeded_people):
    ada, ben, _ = seeded_people
    created = await client.post(MOVIES_URL, json=movie_body([ada, ben]))
    movie_id = created.json()["data"]["id"]

    response = await client.put(f"{MOVIES_URL}{movie_id}", json=movie_body([ada, 999], title="Changed"))

    assert response.status_code == 400
    assert response.json()["data"] == {"missing_ids": [999]}

    fetched = (await client.get(f"{MOVIES_URL}{movie_id}")).json()["data"]
    assert fetched["title"] == "Arrival"
    assert [actor["id"] for actor in fetched["actors"]] == [ada, ben]


async def test_update_unknown_movie(client, seeded_people):
    response = await client.put(f"{MOVIES_URL}4242", json=movie_body([seeded_people[0]]))

    assert response.status_code == 404
    assert response.json() == {"status": False, "message": "Movie not found", "data": None}


async def test_get_unknown_movie(client):
    response = await client.get(f"{MOVIES_URL}1")

    assert response.status_code == 404
    assert response.json()["message"] == "Movie not found"


async def test_delete_movie(client, seeded_people):
    created = await client.post(MOVIES_URL, json=movie_body(seeded_people))
    movie_id = created.json()["data"]["id"]

    response = await client.delete(f"{MOVIES_URL}{movie_id}")

    assert response.status_code == 200
    assert response.json() == {"status": True, "message": "Deleted successfully.", "data": None}
    assert (await client.get(f"{MOVIES_URL}{movie_id}")).status_code == 404

    person = await client.get(f"/api/v1/people/{seeded_people[0]}")
    assert person.status_code == 200
    assert person.json()["data"]["movies"] == []


async def test_list_and_search_movies(client):
    for title in ["The Matrix", "Heat", "Matrix Reloaded"]:
        await client.post(MOVIES_URL, json=movie_body([], title=title))

    listing = await client.get(MOVIES_URL, params={"page": 1, "size": 2})
    search = await client.get(f"{MOVIES_URL}search", params={"q": "MATRIX"})

    page = listing.json()["data"]
    assert page["total"] == 3
    assert [movie["title"] for movie in page["items"]] == ["The Matrix", "Heat"]
    assert page["has_next"] is True
    assert [movie["title"] for movie in search.json()["data"]] == ["Matrix Reloaded", "The Matrix"]


async def test_request_id_is_echoed(client):
    response = await client.get(MOVIES_URL, headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
