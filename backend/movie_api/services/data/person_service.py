"""
Person Service - Business logic for person operations
"""

from typing import List, Optional, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from movie_api.models import Person, Movie, PersonCreate, PersonUpdate
from movie_api.core.database import commit_or_rollback
from movie_api.core.exceptions import NotFoundError
from movie_api.core.logging import get_logger

logger = get_logger(__name__)

class PersonService:
    """Service for person business logic"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_person_by_id(self, person_id: int) -> Optional[Person]:
        """Get person by ID"""

        result = await self.db.execute(select(Person).where(Person.id == person_id))
        return result.scalar_one_or_none()

    async def get_person_or_404(self, person_id: int) -> Person:
        person = await self.get_person_by_id(person_id)
        if person is None:
            raise NotFoundError("Person", person_id)
        return person

    async def get_movie_titles(self, person_id: int) -> List[str]:
        """Titles of the movies a person is cast in"""

        result = await self.db.execute(
            select(Movie.title)
            .join(Movie.actors)
            .where(Person.id == person_id)
            .order_by(Movie.title)
        )
        return list(result.scalars().all())

    async def get_person_detail(self, person_id: int) -> Dict[str, Any]:
        """Get person with the titles of their movies"""

        person = await self.get_person_or_404(person_id)
        return {
            "id": person.id,
            "name": person.name,
            "date_of_birth": person.date_of_birth,
            "created_at": person.created_at,
            "updated_at": person.updated_at,
            "movies": await self.get_movie_titles(person_id),
        }

    async def get_people_paginated(self, page: int = 1, size: int = 10) -> Dict[str, Any]:
        """Get paginated people"""

        total_result = await self.db.execute(select(func.count(Person.id)))
        total = total_result.scalar() or 0

        offset = (page - 1) * size
        result = await self.db.execute(
            select(Person).order_by(Person.id).offset(offset).limit(size)
        )
        people = result.scalars().all()

        return {
            "items": people,
            "total": total,
            "page": page,
            "size": size,
            "has_next": offset + size < total,
            "has_prev": page > 1
        }

    async def search_people(self, q: str, limit: int = 10) -> List[Person]:
        """Search people by name"""

        query = select(Person).where(
            Person.name.ilike(f"%{q}%")
        ).order_by(Person.name).limit(limit)

        result = await self.db.execute(query)
        return result.scalars().all()

    async def create_person(self, person_data: PersonCreate) -> Person:
        """Create new person"""

        person = Person(**person_data.model_dump())
        self.db.add(person)

        await commit_or_rollback(self.db)
        await self.db.refresh(person)

        logger.info(f"Created person: {person.name} ({person.id})")
        return person

    async def update_person(self, person_id: int, person_data: PersonUpdate) -> Person:
        """Update person"""

        person = await self.get_person_or_404(person_id)

        update_data = person_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(person, field, value)

        await commit_or_rollback(self.db)
        await self.db.refresh(person)

        logger.info(f"Updated person: {person.name} ({person.id})")
        return person

    async def delete_person(self, person_id: int) -> None:
        """Delete person and detach them from every cast they were in"""

        result = await self.db.execute(
            select(Person)
            .options(selectinload(Person.movies))
            .where(Person.id == person_id)
        )
        person = result.scalar_one_or_none()
        if person is None:
            raise NotFoundError("Person", person_id)

        detached = len(person.movies)
        await self.db.delete(person)
        await commit_or_rollback(self.db)

        logger.info(f"Deleted person: {person.name} ({person_id})", detached_from_movies=detached)
