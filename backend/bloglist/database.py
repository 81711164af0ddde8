"""
Bloglist Backend - Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine, provides a session dependency that commits on
       success and rolls back on error.
Who:   Used by the store dependency (bloglist.dependencies) and health check.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling:
    PostgreSQL (asyncpg): QueuePool sized by db_pool_size / db_max_overflow,
    pre-ping enabled, connections recycled hourly.
    SQLite (aiosqlite, tests): the dialect picks its own pool and rejects
    pool_size / max_overflow, so those are left out.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from bloglist.config import settings


# ── Engine Configuration ──────────────────────────────────────────────────
def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        "pool_recycle": 3600,
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return options


engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after commit, outside the session
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object, which Alembic reads for --autogenerate and
    the test suite uses for create_all/drop_all.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the caller (the blog store performs queries)
        3. On success: commits the transaction
        4. On error: rolls back, then re-raises for the global handlers
        5. Always: closes the session (returns connection to pool)
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
async def dispose_engine() -> None:
    """Closes all pooled connections; called on application shutdown."""
    await engine.dispose()
