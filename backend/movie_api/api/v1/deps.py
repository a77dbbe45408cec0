"""
API Dependencies
"""

from typing import Dict
from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from movie_api.core.config import settings
from movie_api.core.database import get_db
from movie_api.services import MovieService, PersonService, StorageService

# ==========================================
# SERVICE DEPENDENCIES
# ==========================================

async def get_movie_service(db: AsyncSession = Depends(get_db)) -> MovieService:
    """Movie service bound to the request's session"""
    return MovieService(db)

async def get_person_service(db: AsyncSession = Depends(get_db)) -> PersonService:
    """Person service bound to the request's session"""
    return PersonService(db)

def get_storage_service() -> StorageService:
    return StorageService()

# ==========================================
# PAGINATION DEPENDENCIES
# ==========================================

async def get_pagination(
    page: int = Query(1, ge=1, description="Page number"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Page size")
) -> Dict[str, int]:
    """Get pagination parameters"""
    return {
        "page": page,
        "size": size,
    }
