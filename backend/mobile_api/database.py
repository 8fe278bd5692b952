"""
Mobile API Backend — Database Session Management
=================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine with connection pooling, provides a session
       dependency that auto-commits on success and auto-rolls-back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Connection lifecycle:
    The engine (and its pool) is acquired once for the process lifetime.
    The lifespan handler probes it on startup (verify_connection) and
    disposes it on shutdown (dispose_engine).

Uniqueness:
    The email uniqueness invariant lives in the database (unique index on
    accounts.email), so concurrent registrations are arbitrated by the
    store itself rather than by in-process locks.
"""

import logging
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from tenacity import (
    before_sleep_log,
    retry,
    stop_after_attempt,
    wait_exponential_jitter,
)

from mobile_api.config import settings

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> Dict[str, Any]:
    """
    Pool options for the configured backend.

    SQLite (used by the test-suite) ignores server-side pool sizing, so only
    the options every dialect accepts are passed for it.
    """
    options: Dict[str, Any] = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        "echo": settings.log_level == "DEBUG",
    }
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
# None when DATABASE_URL is unset; the lifespan then aborts in validate_required
engine: Optional[AsyncEngine] = (
    create_async_engine(settings.database_url, **_engine_options(settings.database_url))
    if settings.database_url
    else None
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after the request commits
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object that Alembic reads for migrations.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back the transaction
        5. Always: closes the session (returns connection to pool)

    Raises:
        Any database exceptions are propagated to the global error handler,
        which returns appropriate HTTP status codes.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
@retry(
    stop=stop_after_attempt(settings.db_connect_attempts),
    wait=wait_exponential_jitter(initial=1, max=settings.db_connect_max_wait),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
async def verify_connection() -> None:
    """
    What:  Executes SELECT 1 against the configured database.
    When:  Called once during application startup.
    How:   Retried with exponential backoff + jitter; after the final attempt
           the last exception propagates and startup aborts.
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database connection verified")


async def create_tables() -> None:
    """Creates all tables known to Base.metadata (AUTO_CREATE_TABLES=true)."""
    # Models must be imported so their tables are registered on the metadata
    from mobile_api.models import account, feedback, notification, profile  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    if engine is not None:
        await engine.dispose()
