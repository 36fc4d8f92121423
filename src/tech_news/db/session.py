"""Database engine, session factory and schema provisioning."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from tech_news.core.settings import settings, to_async_url

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import tech_news.models  # noqa: E402,F401


def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:  # pragma: no cover - driver hook
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """Make SQLite honour foreign keys and ON DELETE CASCADE like MySQL does."""
    if async_engine.dialect.name == "sqlite":
        event.listen(async_engine.sync_engine, "connect", _set_sqlite_pragma)


def build_engine(url: str | None = None, **kwargs) -> AsyncEngine:
    """Create an async engine for ``url`` (defaults to the configured database)."""
    url = to_async_url(url) if url else settings.effective_database_url
    if not url.startswith("sqlite"):
        kwargs.setdefault("pool_pre_ping", True)
    async_engine = create_async_engine(url, echo=settings.sql_debug, **kwargs)
    enable_sqlite_foreign_keys(async_engine)
    return async_engine


engine = build_engine()

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for dependency injection."""
    async with AsyncSessionLocal() as db:
        yield db


async def create_tables(bind: AsyncEngine | None = None) -> None:
    """Create any missing tables without touching existing data."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_tables(bind: AsyncEngine | None = None) -> None:
    """Drop all database tables."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def sync_schema(force: bool = False, bind: AsyncEngine | None = None) -> None:
    """Bring the schema in line with the declared models.

    Args:
        force: Drop every table before recreating it. Destroys all data and is
            meant for development and test bootstrap only.
        bind: Engine to use instead of the application engine.
    """
    if force:
        logger.warning("Dropping all tables before recreating the schema")
        await drop_tables(bind)
    await create_tables(bind)
    logger.info("Database schema is in sync (%d tables)", len(Base.metadata.tables))
