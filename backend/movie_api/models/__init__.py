"""
Models Package - Main imports
"""

# Database models
from .database import Base, Movie, Person, movie_person

# Pydantic schemas
from .schemas import (
    # Common
    BaseResponse, ErrorResponse, PaginatedResponse,

    # Movie schemas
    MovieBase, MovieCreate, MovieUpdate, Movie as MovieSchema, MovieDetail, MovieSearchResult,

    # Person schemas
    PersonBase, PersonCreate, PersonUpdate, Person as PersonSchema, PersonDetail, PersonSearchResult,

    # Media schemas
    PosterUpload,
)

__all__ = [
    # Database models
    "Base", "Movie", "Person", "movie_person",

    # Common schemas
    "BaseResponse", "ErrorResponse", "PaginatedResponse",

    # Movie schemas
    "MovieBase", "MovieCreate", "MovieUpdate", "MovieSchema", "MovieDetail", "MovieSearchResult",

    # Person schemas
    "PersonBase", "PersonCreate", "PersonUpdate", "PersonSchema", "PersonDetail", "PersonSearchResult",

    # Media schemas
    "PosterUpload",
]
