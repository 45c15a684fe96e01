"""
Database engine, session factory and session dependency.

The engine and session factory are built once in the application lifespan
and stored on ``app.state``; request handlers receive a fresh
``AsyncSession`` through the ``get_db`` dependency.
"""

from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def create_engine(database_url: str) -> AsyncEngine:
    """Create the shared async engine for the store."""
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, future=True)
    return create_async_engine(
        database_url,
        future=True,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        pool_recycle=3600,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    # Records stay loaded after commit
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """Create the clock_records table and its indexes when missing."""
    # Import models so they are registered with Base.metadata
    from timesheet.fastapi.models import ClockRecord  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    session_factory = request.app.state.session_factory
    async with session_factory() as db:
        yield db
