"""
Movie Pydantic Schemas
"""

from datetime import date
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from .common import TimestampMixin
from .person import Person

class MovieBase(BaseModel):
    """Base movie fields"""
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    language: str = Field(..., min_length=1, max_length=50)
    release_date: Optional[date] = None
    cover_image: Optional[str] = Field(None, max_length=1000)

class MovieCreate(MovieBase):
    """Create movie schema"""
    actor_ids: List[int] = Field(default_factory=list)

class MovieUpdate(MovieCreate):
    """Update movie schema; replaces every field and reconciles the cast to actor_ids"""
    pass

class Movie(MovieBase):
    """Movie response schema"""
    id: int
    actors: List[Person] = []

    model_config = ConfigDict(from_attributes=True)

class MovieDetail(Movie, TimestampMixin):
    """Detailed movie response"""
    pass

class MovieSearchResult(BaseModel):
    """Movie search result schema"""
    id: int
    title: str
    language: str
    release_date: Optional[date] = None
    cover_image: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
