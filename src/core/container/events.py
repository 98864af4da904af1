"""Resource event publisher dependency factory.

Application-scoped singleton. The adapter is chosen from
settings.event_publisher_type:
    - 'in-memory': InMemoryResourceEventPublisher (dev, tests, single server)
    - 'redis': RedisStreamResourceEventPublisher (external consumers)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from src.domain.protocols.resource_event_publisher import ResourceEventPublisher


@lru_cache()
def get_resource_event_publisher() -> "ResourceEventPublisher":
    """Get resource event publisher singleton (app-scoped).

    Returns:
        Publisher implementing ResourceEventPublisher.

    Raises:
        ValueError: If EVENT_PUBLISHER_TYPE is unsupported.

    Usage:
        # Application Layer (direct use)
        publisher = get_resource_event_publisher()
        await publisher.publish(event)

        # Presentation Layer (FastAPI Depends)
        publisher: ResourceEventPublisher = Depends(get_resource_event_publisher)
    """
    settings = get_settings()
    publisher_type = settings.event_publisher_type

    if publisher_type == "in-memory":
        from src.infrastructure.events import InMemoryResourceEventPublisher

        return InMemoryResourceEventPublisher(logger=get_logger())

    if publisher_type == "redis":
        from redis.asyncio import ConnectionPool, Redis

        from src.infrastructure.events import RedisStreamResourceEventPublisher

        pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=20,
            decode_responses=False,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
        )
        return RedisStreamResourceEventPublisher(
            redis_client=Redis(connection_pool=pool),
            logger=get_logger(),
            stream=settings.resource_events_stream,
            max_len=settings.event_stream_max_len,
        )

    raise ValueError(
        f"Unsupported EVENT_PUBLISHER_TYPE: {publisher_type}. "
        "Supported: 'in-memory', 'redis'"
    )
