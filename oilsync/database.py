"""
Database engine, session factory and table bootstrap.

PostgreSQL (asyncpg) is used when ``DATABASE_URL`` points at it; otherwise the
application runs on SQLite through aiosqlite, including a pure in-memory
database for development and tests.
"""
import logging
import time
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine for the configured backend."""
    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite+aiosqlite://", "sqlite+aiosqlite:///:memory:"):
            # one shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
        kwargs["pool_size"] = 20
    return create_async_engine(database_url, **kwargs)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def init_db(engine: AsyncEngine) -> None:
    """Create all tables and seed the vehicle catalogue."""
    # Import models so they register on Base.metadata
    from oilsync import models  # noqa: F401
    from oilsync.services.vehicles import seed_vehicle_catalogue

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with create_sessionmaker(engine)() as session:
        await seed_vehicle_catalogue(session)


async def check_connection(engine: AsyncEngine) -> dict:
    """Run ``SELECT 1`` and report the outcome with its latency."""
    started = time.perf_counter()
    backend = engine.url.get_backend_name()
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return {
            "success": False,
            "backend": backend,
            "response_time_ms": round((time.perf_counter() - started) * 1000, 2),
            "error": str(e),
        }
    return {
        "success": True,
        "backend": backend,
        "response_time_ms": round((time.perf_counter() - started) * 1000, 2),
    }


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding a session bound to the application's engine."""
    sessionmaker = request.app.state.sessionmaker
    async with sessionmaker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
