"""
Movie Catalog API - Core Module
===============================

This module contains the core functionality and shared components
for the Movie Catalog API.

Components:
- config: Application configuration management
- database: Database connection and session management
- logging: Structured logging setup
- exceptions: Error taxonomy shared by services and routers

Usage:
    from movie_api.core import settings, get_db, get_logger
"""

from .config import settings
from .logging import get_logger, setup_logging
from .database import get_db, init_database, close_database
from .exceptions import (
    MovieCatalogError,
    NotFoundError,
    InvalidReferenceError,
    PersistenceError,
    InvalidUploadError,
)

__all__ = [
    # Configuration
    "settings",

    # Logging
    "get_logger",
    "setup_logging",

    # Database
    "get_db",
    "init_database",
    "close_database",

    # Errors
    "MovieCatalogError",
    "NotFoundError",
    "InvalidReferenceError",
    "PersistenceError",
    "InvalidUploadError",
]
