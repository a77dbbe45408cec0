"""
Seed database with sample data for development
"""
import asyncio
from datetime import date

from movie_api.core.database import close_database, create_tables, get_db_session, init_database
from movie_api.core.logging import get_logger, setup_logging
from movie_api.models import MovieCreate, PersonCreate
from movie_api.services import MovieService, PersonService

logger = get_logger(__name__)

PEOPLE = [
    PersonCreate(name="Tim Robbins", date_of_birth=date(1958, 10, 16)),
    PersonCreate(name="Morgan Freeman", date_of_birth=date(1937, 6, 1)),
    PersonCreate(name="Marlon Brando", date_of_birth=date(1924, 4, 3)),
    PersonCreate(name="Al Pacino", date_of_birth=date(1940, 4, 25)),
]

async def seed_data():
    """Add sample people and movies to the database"""
    await init_database()
    await create_tables()

    async with get_db_session() as session:
        people = PersonService(session)
        created = [await people.create_person(person) for person in PEOPLE]
        ids = {person.name: person.id for person in created}

        movies = MovieService(session)
        await movies.create_movie(MovieCreate(
            title="The Shawshank Redemption",
            description="Two imprisoned men bond over a number of years...",
            language="English",
            release_date=date(1994, 9, 23),
            actor_ids=[ids["Tim Robbins"], ids["Morgan Freeman"]],
        ))
        await movies.create_movie(MovieCreate(
            title="The Godfather",
            description="The aging patriarch of an organized crime dynasty...",
            language="English",
            release_date=date(1972, 3, 24),
            actor_ids=[ids["Marlon Brando"], ids["Al Pacino"]],
        ))

    await close_database()
    logger.info("Sample data added successfully", people=len(created), movies=2)

if __name__ == "__main__":
    setup_logging()
    asyncio.run(seed_data())
