"""Async SQLAlchemy engine and session factory for the catalog.

Production runs on PostgreSQL through asyncpg. Tests and local experiments
run on SQLite through aiosqlite; an in-memory SQLite database only lives as
long as its single connection, so it is pinned with StaticPool.

Usage:
    db = Database(settings.database_url)
    async with db.get_session() as session:
        repo = ResourceRepository(session)
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool


def engine_options(
    database_url: str, *, echo: bool, pool_size: int, max_overflow: int
) -> dict[str, Any]:
    """Build create_async_engine keyword arguments for a database URL.

    Args:
        database_url: SQLAlchemy URL.
        echo: Log SQL statements.
        pool_size: Pooled connections (server databases only).
        max_overflow: Extra connections above pool_size (server databases only).

    Returns:
        Engine keyword arguments.
    """
    options: dict[str, Any] = {"echo": echo}

    if database_url.startswith("sqlite"):
        options["poolclass"] = StaticPool
        options["connect_args"] = {"check_same_thread": False}
        return options

    options.update(
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
    )
    if database_url.startswith("postgresql"):
        options["connect_args"] = {
            "server_settings": {"jit": "off"},
            "command_timeout": 60,
            "timeout": 30,
        }
    return options


class Database:
    """Owns the engine; hands out one transactional session per unit of work.

    Attributes:
        engine: Async engine shared by every session.
        async_session: Session factory (objects survive commit).
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            **engine_options(
                database_url,
                echo=echo,
                pool_size=pool_size,
                max_overflow=max_overflow,
            ),
        )
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session scoped to the ``async with`` block.

        Commits on normal exit and rolls back if the block raises.

        Yields:
            AsyncSession bound to this engine.
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create the catalog tables from model metadata.

        Used by tests against SQLite. Real deployments run Alembic.
        """
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop the catalog tables (tests only)."""
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def check_connection(self) -> bool:
        """Run ``SELECT 1`` and report whether the database answered."""
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
        except SQLAlchemyError:
            return False
        return True

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        await self.engine.dispose()
