from datetime import date

import pytest
from pydantic import ValidationError
from sqlalchemy import select

from movie_api.core.exceptions import NotFoundError
from movie_api.models import Movie, PersonCreate, PersonUpdate
from movie_api.services import PersonService


async def test_create_and_fetch_person(db_session):
    service = PersonService(db_session)

    person = await service.create_person(PersonCreate(name="Dora Director", date_of_birth=date(1965, 7, 4)))
    fetched = await service.get_person_by_id(person.id)

    assert fetched is person
    assert fetched.name == "Dora Director"
    assert fetched.date_of_birth == date(1965, 7, 4)


async def test_get_unknown_person(db_session):
    with pytest.raises(NotFoundError) as exc_info:
        await PersonService(db_session).get_person_or_404(404)

    assert exc_info.value.message == "Person not found"


async def test_detail_lists_movie_titles(db_session, people, movie_factory):
    await movie_factory(title="Zodiac", actors=[people[0]])
    await movie_factory(title="Alien", actors=[people[0], people[1]])
    await movie_factory(title="Heat", actors=[people[1]])

    detail = await PersonService(db_session).get_person_detail(people[0].id)

    assert detail["name"] == "Ada Actor"
    assert detail["movies"] == ["Alien", "Zodiac"]


async def test_partial_update_keeps_other_fields(db_session, people):
    service = PersonService(db_session)

    updated = await service.update_person(people[1].id, PersonUpdate(name="Ben Renamed"))

    assert updated.name == "Ben Renamed"
    assert updated.date_of_birth == date(1980, 2, 2)


@pytest.mark.parametrize("field", ["name", "date_of_birth"])
def test_person_update_rejects_explicit_null(field):
    with pytest.raises(ValidationError):
        PersonUpdate(**{field: None})

    assert PersonUpdate().model_dump(exclude_unset=True) == {}


async def test_delete_person_detaches_from_casts(db_session, people, movie_factory):
    movie = await movie_factory(title="Ensemble", actors=people)
    service = PersonService(db_session)

    await service.delete_person(people[1].id)

    assert await service.get_person_by_id(2) is None
    result = await db_session.execute(
        select(Movie).where(Movie.id == movie.id).execution_options(populate_existing=True)
    )
    assert [person.id for person in result.scalar_one().actors] == [1, 3]


async def test_delete_unknown_person(db_session, commit_spy):
    with pytest.raises(NotFoundError):
        await PersonService(db_session).delete_person(99)

    assert commit_spy == []


async def test_search_and_paginate_people(db_session, people):
    service = PersonService(db_session)

    found = await service.search_people("actor")
    page = await service.get_people_paginated(page=2, size=2)

    assert [person.name for person in found] == ["Ada Actor", "Ben Actor"]
    assert page["total"] == 3
    assert [person.id for person in page["items"]] == [3]
    assert page["has_prev"] and not page["has_next"]
