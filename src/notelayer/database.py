# Database connection setup for the sql storage backend
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from .config import Settings, get_settings
from .core.models.base import BaseModel


def create_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    """Create an async engine from settings."""
    settings = settings or get_settings()
    kwargs = {"echo": settings.database_echo}

    # an in-memory sqlite db only lives as long as its connection, so share one
    if settings.database_url.startswith("sqlite") and ":memory:" in settings.database_url:
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}

    return create_async_engine(settings.database_url, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Session factory bound to the engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(engine: AsyncEngine):
    """Create all tables."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)
