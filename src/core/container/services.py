"""Application service factories.

Request-scoped: each request gets a ResourceService bound to its own
repository (and therefore its own database session).
"""

from fastapi import Depends

from src.application.services.resource_service import ResourceService
from src.core.config import settings
from src.core.container.events import get_resource_event_publisher
from src.core.container.infrastructure import get_logger
from src.core.container.repositories import get_resource_repository
from src.infrastructure.persistence.repositories import ResourceRepository


async def get_resource_service(
    resource_repo: ResourceRepository = Depends(get_resource_repository),
) -> ResourceService:
    """Get resource service (request-scoped).

    Args:
        resource_repo: Request-scoped repository.

    Returns:
        ResourceService wired to the app-scoped publisher and logger.

    Usage:
        # Presentation Layer (FastAPI Depends)
        service: ResourceService = Depends(get_resource_service)
    """
    return ResourceService(
        resource_repo=resource_repo,
        event_publisher=get_resource_event_publisher(),
        logger=get_logger(),
        export_batch_size=settings.export_batch_size,
    )
