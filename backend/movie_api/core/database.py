"""
Movie Catalog API - Database Management
=======================================

Async database connection management using SQLAlchemy 2.0+.
PostgreSQL (asyncpg) in deployments, SQLite (aiosqlite) for local runs
and tests.

Usage:
    @router.get("/{movie_id}")
    async def get_movie(movie_id: int, db: AsyncSession = Depends(get_db)):
        return await MovieService(db).get_movie_or_404(movie_id)
"""

import time
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional
from urllib.parse import urlparse

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from movie_api.core.config import settings
from movie_api.core.exceptions import PersistenceError
from movie_api.core.logging import get_logger
from movie_api.models.database import Base

logger = get_logger(__name__)

# Set by init_database, cleared by close_database
engine: Optional[AsyncEngine] = None
AsyncSessionLocal: Optional[async_sessionmaker[AsyncSession]] = None


# ==========================================
# ENGINE
# ==========================================

def _safe_url(url: str) -> str:
    parsed_url = urlparse(url)
    if parsed_url.hostname:
        return f"{parsed_url.scheme}://**:**@{parsed_url.hostname}:{parsed_url.port}{parsed_url.path}"
    return url


def create_database_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """Engine for DATABASE_URL, or database_url when given"""

    url = database_url or settings.DATABASE_URL
    logger.info("Creating database engine", url=_safe_url(url))

    engine_config: Dict[str, Any] = {
        "url": url,
        "echo": settings.DB_ECHO,
        "future": True,
    }

    if url.startswith("sqlite"):
        # One shared connection so in-memory databases survive across sessions
        engine_config.update({
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        })
    else:
        engine_config.update({
            "pool_pre_ping": True,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "connect_args": {
                "server_settings": {
                    "application_name": f"{settings.APP_NAME}_v{settings.APP_VERSION}",
                },
                "command_timeout": 60,
            },
        })

    return create_async_engine(**engine_config)


# ==========================================
# SESSION MANAGEMENT
# ==========================================

def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions that keep loaded state after commit and only flush on commit"""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Session scope for scripts and background work.

    Usage:
        async with get_db_session() as db:
            await MovieService(db).get_movie_or_404(1)
    """
    if AsyncSessionLocal is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception as e:
            logger.error(f"Rolling back session after error: {e}")
            await session.rollback()
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request, closed when it ends"""
    async with get_db_session() as session:
        yield session


async def commit_or_rollback(db: AsyncSession) -> None:
    """
    Commit the session's pending changes as one unit.

    On failure the session is rolled back and PersistenceError is raised,
    so callers never observe a partially written operation.
    """
    try:
        await db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Commit failed, rolling back: {e}")
        await db.rollback()
        raise PersistenceError() from e


# ==========================================
# LIFECYCLE
# ==========================================

async def init_database(database_url: Optional[str] = None) -> None:
    """Create the global engine and session factory and check connectivity"""
    global engine, AsyncSessionLocal

    engine = create_database_engine(database_url)
    AsyncSessionLocal = create_session_factory(engine)

    await ping_database()
    logger.info("Database ready")


async def create_tables() -> None:
    """Create the movie, people and cast tables if missing"""
    if engine is None:
        raise RuntimeError("Database engine not initialized")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables ensured", tables=sorted(Base.metadata.tables))


async def close_database() -> None:
    global engine, AsyncSessionLocal

    if engine is None:
        return

    try:
        await engine.dispose()
        logger.info("Database engine disposed")
    finally:
        engine = None
        AsyncSessionLocal = None


# ==========================================
# HEALTH
# ==========================================

async def ping_database() -> None:
    """Run SELECT 1, letting connection errors propagate"""
    if engine is None:
        raise RuntimeError("Database engine not initialized")

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database unreachable: {e}")
        raise


async def check_database_health() -> Dict[str, Any]:
    """Connectivity and latency report used by the /health endpoint"""
    report: Dict[str, Any] = {"status": "healthy", "checks": {}}

    if engine is None:
        report["status"] = "unhealthy"
        report["error"] = "Database engine not initialized"
        return report

    started = time.perf_counter()
    try:
        await ping_database()
        report["checks"]["connectivity"] = "pass"
    except SQLAlchemyError as e:
        report["status"] = "unhealthy"
        report["checks"]["connectivity"] = f"fail: {e}"
    report["latency_ms"] = round((time.perf_counter() - started) * 1000, 2)

    return report


__all__ = [
    "engine",
    "AsyncSessionLocal",
    "get_db",
    "get_db_session",
    "commit_or_rollback",
    "init_database",
    "create_tables",
    "close_database",
    "ping_database",
    "check_database_health",
    "create_database_engine",
    "create_session_factory",
]
