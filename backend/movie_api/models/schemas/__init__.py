"""
Pydantic Schemas - Main imports
"""

from .common import *
from .movie import *
from .person import *
from .media import *

__all__ = [
    # Common
    "BaseResponse", "ErrorResponse", "PaginatedResponse",

    # Movie
    "MovieBase", "MovieCreate", "MovieUpdate", "Movie", "MovieDetail", "MovieSearchResult",

    # Person
    "PersonBase", "PersonCreate", "PersonUpdate", "Person", "PersonDetail", "PersonSearchResult",

    # Media
    "PosterUpload",
]
