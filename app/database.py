# python
"""Database engine and session utilities.

This module sets up the asynchronous database engine and session factory used
by every request, and provides a utility for fetching an asynchronous database
session. ORM models share the single declarative ``Base`` from ``models.base``.
"""
import os
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings
from models.base import Base

# For testing, prioritize TEST_DATABASE_URL
DB_URL = None
if os.getenv("TESTING") == "true":
    DB_URL = os.getenv("TEST_DATABASE_URL") or settings.test_database_url
else:
    DB_URL = settings.database_url

DB_URL = (DB_URL or "").strip()
if not DB_URL:
    raise RuntimeError(
        "DATABASE_URL is not configured. Set it in the environment or .env file (e.g., DATABASE_URL=postgresql+asyncpg://<user>:<pass>@<host>/<db>)."
    )

_engine_kwargs: dict[str, Any] = {"echo": settings.debug}
if not DB_URL.startswith("sqlite"):
    _engine_kwargs.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )

engine = create_async_engine(DB_URL, **_engine_kwargs)


def enable_sqlite_foreign_keys(async_engine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)

AsyncSessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False)

__all__ = ["Base", "engine", "AsyncSessionLocal", "get_db", "enable_sqlite_foreign_keys"]


async def get_db() -> AsyncGenerator[AsyncSession, Any]:
    async with AsyncSessionLocal() as session:
        yield session
