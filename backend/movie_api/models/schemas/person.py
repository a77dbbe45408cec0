"""
Person Pydantic Schemas
"""

from datetime import date
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .common import TimestampMixin

class PersonBase(BaseModel):
    """Base person fields"""
    name: str = Field(..., min_length=1, max_length=200)
    date_of_birth: date

class PersonCreate(PersonBase):
    """Create person schema"""
    pass

class PersonUpdate(BaseModel):
    """Update person schema"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    date_of_birth: Optional[date] = None

    @field_validator("name", "date_of_birth")
    @classmethod
    def reject_explicit_null(cls, v):
        # Omit a field to keep it; null would blank a required column
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

class Person(BaseModel):
    """Person as it appears in a movie cast"""
    id: int
    name: str
    date_of_birth: Optional[date] = None

    model_config = ConfigDict(from_attributes=True)

class PersonDetail(Person, TimestampMixin):
    """Detailed person response with the titles they appear in"""
    movies: List[str] = []

class PersonSearchResult(BaseModel):
    """Person search result schema"""
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
