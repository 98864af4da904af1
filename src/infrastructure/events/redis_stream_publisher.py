"""Redis Streams publisher implementing ResourceEventPublisher.

Appends resource events and export batches to a single Redis stream for
out-of-process consumers. Each entry carries its partition key so consumer
groups can keep per-resource ordering.

Architecture:
    - Implements ResourceEventPublisher without inheritance (structural typing)
    - XADD with approximate MAXLEN to keep the stream bounded
    - Fire-and-forget: publish schedules the send and returns immediately
    - Fail-open: send outcomes are reported through a completion callback
      and logged, never raised to the caller

Stream Entry Fields:
    key:        resource id, or BULK_EXPORT_KEY for export batches
    event_type: RESOURCE_CREATED | RESOURCE_UPDATED | RESOURCE_DELETED | BULK_EXPORT
    payload:    JSON document (ResourceEvent.to_dict / ResourceExportBatch.to_dict)
"""

import asyncio
import json
from collections.abc import Sequence
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.constants import (
    BULK_EXPORT_KEY,
    EVENT_STREAM_MAX_LEN_DEFAULT,
    RESOURCE_EVENTS_STREAM_DEFAULT,
)
from src.domain.events.resource_events import ResourceEvent, ResourceExportBatch
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.resource_snapshot import ResourceSnapshot

BULK_EXPORT_EVENT_TYPE = "BULK_EXPORT"


class RedisStreamResourceEventPublisher:
    """Redis implementation of ResourceEventPublisher.

    Note: Does NOT inherit from ResourceEventPublisher (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
        _stream: Stream name entries are appended to.
        _max_len: Approximate MAXLEN applied on every XADD.
        _pending: In-flight send tasks (kept referenced until done).
        _logger: Logger instance.
    """

    def __init__(
        self,
        redis_client: "Redis[bytes]",  # type: ignore[type-arg]
        logger: LoggerProtocol,
        stream: str = RESOURCE_EVENTS_STREAM_DEFAULT,
        max_len: int = EVENT_STREAM_MAX_LEN_DEFAULT,
    ) -> None:
        """Initialize Redis stream publisher.

        Args:
            redis_client: Async Redis client instance.
            logger: Structured logger.
            stream: Target stream name.
            max_len: Approximate cap on stream length.
        """
        self._redis = redis_client
        self._logger = logger
        self._stream = stream
        self._max_len = max_len
        self._pending: set[asyncio.Task[Any]] = set()

    async def publish(self, event: ResourceEvent) -> None:
        """Schedule a single event append and return without waiting.

        Args:
            event: Resource event to append.
        """
        self._dispatch(
            {
                "key": event.key,
                "event_type": event.event_type.value,
                "payload": json.dumps(event.to_dict()),
            },
            key=event.key,
            event_type=event.event_type.value,
            event_id=str(event.event_id),
        )

    async def publish_batch(
        self, snapshots: Sequence[ResourceSnapshot], batch_size: int
    ) -> int:
        """Schedule one stream entry per export batch.

        Args:
            snapshots: Snapshots to export, in order.
            batch_size: Maximum snapshots per batch.

        Returns:
            Number of batches scheduled.

        Raises:
            ValueError: If batch_size is less than 1.
        """
        batches = ResourceExportBatch.split(snapshots, batch_size, key=BULK_EXPORT_KEY)
        for batch in batches:
            self._dispatch(
                {
                    "key": batch.key,
                    "event_type": BULK_EXPORT_EVENT_TYPE,
                    "payload": json.dumps(batch.to_dict()),
                },
                key=batch.key,
                batch_index=batch.batch_index,
                batch_size=len(batch.resources),
            )
        return len(batches)

    @property
    def pending_count(self) -> int:
        """Number of sends not yet completed."""
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every in-flight send to finish (outcomes already logged)."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def close(self) -> None:
        """Drain in-flight sends and close the Redis connection.

        Should be called during application shutdown.
        """
        await self.drain()
        try:
            await self._redis.aclose()
            self._logger.info("resource_event_publisher_closed", stream=self._stream)
        except RedisError as e:
            self._logger.warning(
                "resource_event_publisher_close_failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )

    def _dispatch(self, fields: dict[str, str], **context: Any) -> None:
        task = asyncio.create_task(self._send(fields))
        self._pending.add(task)
        task.add_done_callback(lambda t: self._on_sent(t, context))

    async def _send(self, fields: dict[str, str]) -> Any:
        return await self._redis.xadd(
            self._stream,
            fields,  # type: ignore[arg-type]
            maxlen=self._max_len,
            approximate=True,
        )

    def _on_sent(self, task: asyncio.Task[Any], context: dict[str, Any]) -> None:
        self._pending.discard(task)

        if task.cancelled():
            self._logger.warning(
                "resource_event_publish_cancelled", stream=self._stream, **context
            )
            return

        error = task.exception()
        if error is None:
            entry_id = task.result()
            self._logger.debug(
                "resource_event_published",
                stream=self._stream,
                entry_id=entry_id.decode() if isinstance(entry_id, bytes) else entry_id,
                **context,
            )
            return

        # Fail-open: transport errors never reach the caller
        self._logger.error(
            "resource_event_publish_failed",
            error=error,  # type: ignore[arg-type]
            stream=self._stream,
            **context,
        )
