"""
Services Package - Main imports
"""

# Data services
from .data import MovieService, PersonService

# External services
from .external import StorageService

__all__ = [
    # Data services
    "MovieService",
    "PersonService",

    # External services
    "StorageService",
]
