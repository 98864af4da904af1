"""ResourceEventPublisher protocol for outbound resource notifications.

Port (interface) for hexagonal architecture. Publishing is a best-effort
side channel: persistence has already succeeded when publish is called, so
adapters must not let transport failures escape. They log instead.

Delivery:
    - At most one attempt per event, no retry
    - Single events keyed by resource id
    - Bulk export batches keyed by BULK_EXPORT_KEY
"""

from typing import Protocol, Sequence

from src.domain.events.resource_events import ResourceEvent
from src.domain.value_objects.resource_snapshot import ResourceSnapshot


class ResourceEventPublisher(Protocol):
    """Resource event publisher protocol (port).

    Example:
        >>> publisher: ResourceEventPublisher = get_resource_event_publisher()
        >>> await publisher.publish(event)
        >>> batches = await publisher.publish_batch(snapshots, batch_size=100)
    """

    async def publish(self, event: ResourceEvent) -> None:
        """Dispatch a single resource event (fire-and-forget).

        Args:
            event: Event to dispatch.
        """
        ...

    async def publish_batch(
        self, snapshots: Sequence[ResourceSnapshot], batch_size: int
    ) -> int:
        """Dispatch snapshots as consecutive fixed-size batches.

        Batches preserve input order; only the last batch may be smaller than
        batch_size. An empty input dispatches nothing.

        Args:
            snapshots: Resource snapshots to export.
            batch_size: Maximum snapshots per batch (>= 1).

        Returns:
            Number of batches dispatched.
        """
        ...
