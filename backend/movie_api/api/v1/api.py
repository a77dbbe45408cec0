"""
API v1 Router - Main API routing configuration
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from movie_api.api.v1.endpoints import movies, people, media
from movie_api.core.config import settings
from movie_api.core.database import check_database_health

# Create main API router
api_router = APIRouter()

# ==========================================
# HEALTH AND STATUS ENDPOINTS
# ==========================================

@api_router.get("/health")
async def health_check():
    """API health check endpoint"""

    database = await check_database_health()
    healthy = database["status"] == "healthy"

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "services": {"database": database}
        }
    )

@api_router.get("/")
async def api_info():
    """API information and welcome endpoint"""

    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "api_version": "v1",
        "health_check": f"{settings.API_V1_STR}/health",
        "endpoints": {
            "movies": f"{settings.API_V1_STR}/movies",
            "people": f"{settings.API_V1_STR}/people",
            "media": f"{settings.API_V1_STR}/media",
        }
    }

# ==========================================
# INCLUDE ENDPOINT ROUTERS
# ==========================================

api_router.include_router(movies.router, prefix="/movies", tags=["movies"])
api_router.include_router(people.router, prefix="/people", tags=["people"])
api_router.include_router(media.router, prefix="/media", tags=["media"])
