"""
Movie Service - Business logic for movie operations
"""

from typing import List, Optional, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from movie_api.models import Movie, MovieCreate, MovieUpdate
from movie_api.core.database import commit_or_rollback
from movie_api.core.exceptions import NotFoundError
from movie_api.core.logging import get_logger
from movie_api.services.data.cast_reconciliation import (
    CastDelta,
    apply_cast_delta,
    compute_cast_delta,
    resolve_cast,
)

logger = get_logger(__name__)

class MovieService:
    """Service for movie business logic"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_movie_by_id(self, movie_id: int) -> Optional[Movie]:
        """Get movie by ID with its cast loaded"""

        result = await self.db.execute(select(Movie).where(Movie.id == movie_id))
        return result.scalar_one_or_none()

    async def get_movie_or_404(self, movie_id: int) -> Movie:
        movie = await self.get_movie_by_id(movie_id)
        if movie is None:
            raise NotFoundError("Movie", movie_id)
        return movie

    async def get_movies_paginated(self, page: int = 1, size: int = 10) -> Dict[str, Any]:
        """Get paginated movies, oldest first"""

        total_result = await self.db.execute(select(func.count(Movie.id)))
        total = total_result.scalar() or 0

        offset = (page - 1) * size
        result = await self.db.execute(
            select(Movie).order_by(Movie.id).offset(offset).limit(size)
        )
        movies = result.scalars().all()

        return {
            "items": movies,
            "total": total,
            "page": page,
            "size": size,
            "has_next": offset + size < total,
            "has_prev": page > 1
        }

    async def search_movies(self, q: str, limit: int = 10) -> List[Movie]:
        """Search movies by title"""

        query = select(Movie).where(
            Movie.title.ilike(f"%{q}%")
        ).order_by(Movie.title).limit(limit)

        result = await self.db.execute(query)
        return result.scalars().all()

    async def create_movie(self, movie_data: MovieCreate) -> Movie:
        """Create new movie with its cast"""

        # Unknown people abort before anything is added to the session
        actors = await resolve_cast(self.db, movie_data.actor_ids)

        movie = Movie(**movie_data.model_dump(exclude={"actor_ids"}))
        movie.actors = actors
        self.db.add(movie)

        await commit_or_rollback(self.db)
        await self.db.refresh(movie)

        logger.info(f"Created movie: {movie.title} ({movie.id})", cast_size=len(actors))
        return movie

    async def update_movie(self, movie_id: int, movie_data: MovieUpdate) -> Movie:
        """
        Replace a movie's fields and reconcile its cast to movie_data.actor_ids.

        Raises NotFoundError for an unknown movie and InvalidReferenceError
        for unknown people, both before anything is modified. A failed
        commit raises PersistenceError with the session rolled back.
        """

        movie = await self.get_movie_or_404(movie_id)
        actors = await resolve_cast(self.db, movie_data.actor_ids)

        for field, value in movie_data.model_dump(exclude={"actor_ids"}).items():
            setattr(movie, field, value)

        delta = self.reconcile_cast(movie, actors)

        await commit_or_rollback(self.db)
        await self.db.refresh(movie)

        logger.info(
            f"Updated movie: {movie.title} ({movie.id})",
            removed=[person.id for person in delta.to_remove],
            added=[person.id for person in delta.to_add],
        )
        return movie

    def reconcile_cast(self, movie: Movie, actors: List) -> CastDelta:
        """Apply the minimal cast change in memory; persisted by the caller's commit"""

        delta = compute_cast_delta(movie.actors, actors)
        if not delta.is_empty:
            apply_cast_delta(movie.actors, delta)
        return delta

    async def delete_movie(self, movie_id: int) -> None:
        """Delete movie; its cast associations go with it, the people stay"""

        movie = await self.get_movie_or_404(movie_id)

        await self.db.delete(movie)
        await commit_or_rollback(self.db)

        logger.info(f"Deleted movie: {movie.title} ({movie_id})")
