"""Resource event publisher adapters.

Publishers:
    - InMemoryResourceEventPublisher: in-process subscribers (dev/tests)
    - RedisStreamResourceEventPublisher: Redis Streams for external consumers

Selection happens in the container from settings.event_publisher_type.

Usage:
    >>> from src.core.container import get_resource_event_publisher
    >>> publisher = get_resource_event_publisher()
    >>> await publisher.publish(event)
"""

from src.infrastructure.events.in_memory_resource_event_publisher import (
    InMemoryResourceEventPublisher,
)
from src.infrastructure.events.redis_stream_publisher import (
    RedisStreamResourceEventPublisher,
)

__all__ = [
    "InMemoryResourceEventPublisher",
    "RedisStreamResourceEventPublisher",
]
