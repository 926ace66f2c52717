"""SQLAlchemy async engine, session factory and per-request session dependency.

Repositories commit their own writes, so a write is durable (or has failed)
before the handler that issued it builds a response. Closing the
request session rolls back whatever was left uncommitted.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from pressroom.config import get_settings


def get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for ``url``.

    In-memory SQLite databases live on a single connection, so they get a
    StaticPool to keep every session looking at the same data.
    """
    async_url = get_async_url(url)
    kwargs: dict = {"echo": echo}
    if async_url.startswith("sqlite") and (async_url.endswith("://") or ":memory:" in async_url):
        kwargs["poolclass"] = StaticPool
    return create_async_engine(async_url, **kwargs)


def build_session_factory(bind: AsyncEngine, **kwargs) -> async_sessionmaker[AsyncSession]:
    """Session factory whose objects stay readable after commit."""
    kwargs.setdefault("class_", AsyncSession)
    return async_sessionmaker(bind, expire_on_commit=False, **kwargs)


settings = get_settings()
engine = build_engine(settings.database_url, echo=settings.sql_echo)
async_session_factory = build_session_factory(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request."""
    async with async_session_factory() as session:
        yield session
