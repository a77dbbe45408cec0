"""
Movie Catalog API - Main Application
"""
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from movie_api.api.v1 import api_router
from movie_api.core.config import settings, validate_settings
from movie_api.core.database import close_database, create_tables, init_database
from movie_api.core.exceptions import MovieCatalogError
from movie_api.core.logging import get_logger, log_api_request, setup_logging, with_request_context
from movie_api.models import ErrorResponse

# Setup logging
setup_logging()
logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    for problem in validate_settings():
        logger.warning(f"Configuration problem: {problem}")

    await init_database()
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()
    yield
    # Shutdown
    await close_database()

app = FastAPI(
    title=settings.APP_NAME,
    description="Movie catalog with people, casts and poster uploads",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Tag every request with an id and log its outcome"""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    started = time.perf_counter()

    with with_request_context(request_id):
        response = await call_next(request)
        log_api_request(
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration=time.perf_counter() - started,
            client=request.client.host if request.client else None,
        )

    response.headers["X-Request-ID"] = request_id
    return response

# ==========================================
# ERROR HANDLERS
# ==========================================

@app.exception_handler(MovieCatalogError)
async def movie_catalog_error_handler(request: Request, exc: MovieCatalogError):
    data = None
    missing_ids = getattr(exc, "missing_ids", None)
    if missing_ids:
        data = {"missing_ids": missing_ids}

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=exc.message, data=data).model_dump(),
    )

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            message="Validation Failed",
            data=jsonable_encoder(exc.errors()),
        ).model_dump(),
    )

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Internal server error: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(message="Something went wrong").model_dump(),
    )

# Include API router
app.include_router(api_router, prefix=settings.API_V1_STR)

# Mount uploaded posters
app.mount(settings.STATIC_URL, StaticFiles(directory=settings.UPLOAD_DIR), name="static")

@app.get("/")
async def root():
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/api/docs"
    }
