"""Repository dependency factories.

Request-scoped repository instances sharing the request's session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session
from src.infrastructure.persistence.repositories import ResourceRepository


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_resource_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ResourceRepository:
    """Get resource repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        ResourceRepository instance.
    """
    return ResourceRepository(session=session)
