"""Async engine, session factory and unit-of-work helpers."""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.config import settings


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine. SQLite connections get foreign keys enabled."""
    engine = create_async_engine(url, echo=echo)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


engine = build_engine(settings.database_url, echo=settings.database_echo)
async_session_factory = build_session_factory(engine)


@asynccontextmanager
async def unit_of_work(
    factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncIterator[AsyncSession]:
    """
    Open a session whose mutations commit or roll back together.

    Services only flush; the transaction started here is committed when the
    block exits cleanly and rolled back when it raises.
    """
    session_factory = factory or async_session_factory
    async with session_factory() as session:
        async with session.begin():
            yield session


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one unit of work per request."""
    async with unit_of_work() as session:
        yield session
