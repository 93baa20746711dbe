"""Database engine and session management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from messages_api.config.connection import ConnectionDescriptor

# Import models so they are attached to Base.metadata
from messages_api.models import Base  # noqa: F401 - ensures metadata is registered
from messages_api.models import message  # noqa: F401

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None
_descriptor: ConnectionDescriptor | None = None


def create_engine_from_descriptor(descriptor: ConnectionDescriptor) -> AsyncEngine:
    """Create an async engine for the resolved connection."""

    engine_options: dict[str, Any] = {
        "future": True,
        "pool_pre_ping": True,
    }
    if descriptor.log_queries:
        # SQLAlchemy logs every statement at INFO on this logger.
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    connect_args = descriptor.connect_args()
    if connect_args:
        engine_options["connect_args"] = connect_args

    return create_async_engine(descriptor.url, **engine_options)


def init_engine(descriptor: ConnectionDescriptor) -> AsyncEngine:
    """Create the process-wide engine and session factory once.

    Calling it again with the same descriptor returns the existing engine; a
    different descriptor is refused until dispose_engine() has run.
    """

    global _engine, _session_factory, _descriptor
    if _engine is not None:
        if descriptor != _descriptor:
            raise RuntimeError(
                f"Database engine already initialized for {_descriptor.redacted_url}; "
                "dispose it before switching connections."
            )
        return _engine

    _engine = create_engine_from_descriptor(descriptor)
    _descriptor = descriptor
    _session_factory = async_sessionmaker(
        _engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )
    logger.info("Database engine created for %s", descriptor.redacted_url)
    return _engine


def get_engine() -> AsyncEngine:
    if _engine is None:
        raise RuntimeError("Database engine is not initialized. Call init_engine() on startup.")
    return _engine


async def verify_connection() -> None:
    """Open one connection and run a trivial query; failures abort startup."""

    async with get_engine().connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database connection verified.")


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Async context manager that yields a SQLAlchemy session."""

    if _session_factory is None:
        raise RuntimeError("Database engine is not initialized. Call init_engine() on startup.")

    async with _session_factory() as session:
        yield session


async def get_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency-compatible generator yielding a session."""

    async with session_scope() as session:
        yield session


async def dispose_engine() -> None:
    """Dispose of the engine and release pooled connections."""

    global _engine, _session_factory, _descriptor
    if _engine is None:
        return
    await _engine.dispose()
    _engine = None
    _session_factory = None
    _descriptor = None
