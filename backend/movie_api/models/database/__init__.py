"""
Database Models - Main imports
"""

from .base import Base
from .person import Person, movie_person
from .movie import Movie

__all__ = ["Base", "Movie", "Person", "movie_person"]
