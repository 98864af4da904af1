"""In-memory resource event publisher.

Implements the ResourceEventPublisher port by dispatching events to
in-process subscribers. Suitable for development, tests and single-server
deployments; swap to the Redis stream adapter for out-of-process consumers.

Architecture:
    - Implements ResourceEventPublisher (hexagonal adapter pattern)
    - Separate subscriber lists for single events and export batches
    - Fire-and-forget: delivery runs as a tracked background task
    - Fail-open behavior (one subscriber failure doesn't break others)
    - Concurrent subscriber execution (asyncio.gather)

Usage:
    >>> publisher = InMemoryResourceEventPublisher(logger=get_logger())
    >>> publisher.subscribe(audit_resource_change)
    >>> await publisher.publish(event)
    >>> await publisher.drain()
"""

import asyncio
from collections.abc import Awaitable, Callable, Coroutine, Sequence
from typing import Any

from src.core.constants import BULK_EXPORT_KEY
from src.domain.events.resource_events import ResourceEvent, ResourceExportBatch
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.resource_snapshot import ResourceSnapshot

EventHandler = Callable[[ResourceEvent], Awaitable[None]]
BatchHandler = Callable[[ResourceExportBatch], Awaitable[None]]


class InMemoryResourceEventPublisher:
    """In-process publisher with fail-open subscribers.

    ``publish`` and ``publish_batch`` return as soon as delivery is
    scheduled. Use ``drain`` to wait for in-flight deliveries.

    Thread Safety:
        - NOT thread-safe (single-threaded async design)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._event_handlers: list[EventHandler] = []
        self._batch_handlers: list[BatchHandler] = []
        self._logger = logger
        self._pending: set[asyncio.Task[None]] = set()

    def subscribe(self, handler: EventHandler) -> None:
        """Register a handler called for every single resource event."""
        self._event_handlers.append(handler)

    def subscribe_batches(self, handler: BatchHandler) -> None:
        """Register a handler called for every bulk export batch."""
        self._batch_handlers.append(handler)

    async def publish(self, event: ResourceEvent) -> None:
        """Schedule delivery of event to all subscribers.

        Subscriber exceptions are logged at warning level and never
        propagated to the caller.

        Args:
            event: Resource event to deliver.
        """
        self._logger.debug(
            "resource_event_dispatched",
            event_type=event.event_type.value,
            event_id=str(event.event_id),
            key=event.key,
            handler_count=len(self._event_handlers),
        )
        if not self._event_handlers:
            return

        self._track(
            self._run(
                list(self._event_handlers),
                event,
                event_type=event.event_type.value,
                event_id=str(event.event_id),
            )
        )

    async def publish_batch(
        self, snapshots: Sequence[ResourceSnapshot], batch_size: int
    ) -> int:
        """Schedule delivery of snapshots as ordered export batches.

        Batches reach each subscriber in batch_index order.

        Args:
            snapshots: Snapshots to export, in order.
            batch_size: Maximum snapshots per batch.

        Returns:
            Number of batches scheduled.

        Raises:
            ValueError: If batch_size is less than 1.
        """
        batches = ResourceExportBatch.split(snapshots, batch_size, key=BULK_EXPORT_KEY)
        if batches and self._batch_handlers:
            self._track(self._deliver_batches(list(self._batch_handlers), batches))
        return len(batches)

    @property
    def pending_count(self) -> int:
        """Number of deliveries not yet completed."""
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every in-flight delivery to finish."""
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def close(self) -> None:
        """Drain in-flight deliveries. Called during application shutdown."""
        await self.drain()
        self._logger.info("resource_event_publisher_closed", publisher="in-memory")

    def _track(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver_batches(
        self,
        handlers: Sequence[BatchHandler],
        batches: Sequence[ResourceExportBatch],
    ) -> None:
        for batch in batches:
            await self._run(
                handlers,
                batch,
                key=batch.key,
                batch_index=batch.batch_index,
                batch_size=len(batch.resources),
            )

    async def _run(
        self,
        handlers: Sequence[Callable[[Any], Awaitable[None]]],
        payload: Any,
        **context: Any,
    ) -> None:
        results = await asyncio.gather(
            *(handler(payload) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                self._logger.warning(
                    "resource_event_handler_failed",
                    handler_name=getattr(handlers[idx], "__name__", repr(handlers[idx])),
                    error_type=type(result).__name__,
                    error_message=str(result),
                    exc_info=result,
                    **context,
                )
