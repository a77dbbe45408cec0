"""
Movie API Endpoints
"""

from typing import Dict, List
from fastapi import APIRouter, Depends, Query

from movie_api.api.v1.deps import get_movie_service, get_pagination
from movie_api.models import (
    BaseResponse, MovieCreate, MovieDetail, MovieSchema, MovieSearchResult,
    MovieUpdate, PaginatedResponse,
)
from movie_api.services import MovieService

router = APIRouter()

@router.get("/", response_model=BaseResponse[PaginatedResponse[MovieSchema]])
async def get_movies(
    pagination: Dict[str, int] = Depends(get_pagination),
    service: MovieService = Depends(get_movie_service)
):
    """Get movies with their cast, paginated"""

    result = await service.get_movies_paginated(**pagination)
    result["items"] = [MovieSchema.model_validate(movie) for movie in result["items"]]

    return BaseResponse[PaginatedResponse[MovieSchema]](data=PaginatedResponse[MovieSchema](**result))

@router.get("/search", response_model=BaseResponse[List[MovieSearchResult]])
async def search_movies(
    q: str = Query(..., min_length=1),
    limit: int = Query(10, ge=1, le=50),
    service: MovieService = Depends(get_movie_service)
):
    """Search movies by title"""

    movies = await service.search_movies(q, limit)
    return BaseResponse[List[MovieSearchResult]](
        data=[MovieSearchResult.model_validate(movie) for movie in movies]
    )

@router.get("/{movie_id}", response_model=BaseResponse[MovieDetail])
async def get_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Get movie by ID with its cast"""

    movie = await service.get_movie_or_404(movie_id)
    return BaseResponse[MovieDetail](data=MovieDetail.model_validate(movie))

@router.post("/", response_model=BaseResponse[MovieDetail], status_code=201)
async def create_movie(movie_data: MovieCreate, service: MovieService = Depends(get_movie_service)):
    """Create new movie; every actor id must refer to an existing person"""

    movie = await service.create_movie(movie_data)
    return BaseResponse[MovieDetail](
        message="Created successfully.",
        data=MovieDetail.model_validate(movie),
    )

@router.put("/{movie_id}", response_model=BaseResponse[MovieDetail])
async def update_movie(
    movie_id: int,
    movie_data: MovieUpdate,
    service: MovieService = Depends(get_movie_service)
):
    """Replace movie fields and reconcile the cast to actor_ids"""

    movie = await service.update_movie(movie_id, movie_data)
    return BaseResponse[MovieDetail](
        message="Updated successfully.",
        data=MovieDetail.model_validate(movie),
    )

@router.delete("/{movie_id}", response_model=BaseResponse[None])
async def delete_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Delete movie"""

    await service.delete_movie(movie_id)
    return BaseResponse[None](message="Deleted successfully.")
