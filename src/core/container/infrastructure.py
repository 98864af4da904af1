"""Database and logging factories.

Singletons (one per process, via lru_cache):
    get_database: engine + session factory built from settings
    get_logger: structlog console adapter

Per request:
    get_db_session: transactional session for FastAPI dependencies
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Singletons
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Return the process-wide Database.

    Pool sizing comes from DB_POOL_SIZE / DB_MAX_OVERFLOW; SQLite URLs
    ignore it.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger.

    Development renders colored key/value lines; every other environment
    emits one JSON object per line.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


# ============================================================================
# Request-scoped
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that commits when the request handler returns."""
    async with get_database().get_session() as session:
        yield session
