"""Resource aggregate service.

Orchestrates every resource use case: validate, guard, persist, snapshot,
publish. It owns no business rules itself; those live in the aggregate, the
validators and the concurrency guard.

Architecture:
    - Application service (uses repository and publisher ports)
    - Every operation returns Result[T, DomainError]
    - Events are published only after persistence succeeds
    - Publish failures are logged and never change the caller's outcome

Flow (update):
    load -> guard(version) -> validate -> mutate -> save(CAS) -> snapshot
    -> publish(RESOURCE_UPDATED)

Usage:
    service = ResourceService(
        resource_repo=repo,
        event_publisher=publisher,
        logger=logger,
        export_batch_size=100,
    )
    result = await service.create_resource(command)
"""

from typing import Sequence

from uuid_extensions import uuid7

from src.application.commands import (
    CharacteristicSpec,
    CreateResource,
    DeleteResource,
    ExportAllResources,
    UpdateResource,
)
from src.application.dtos import ExportResult
from src.application.queries import GetResource, ListResources
from src.application.services.concurrency_guard import ConcurrencyGuard
from src.core.constants import EXPORT_BATCH_SIZE_DEFAULT
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities import Characteristic, Resource
from src.domain.enums import ResourceEventType
from src.domain.errors import (
    DuplicateCharacteristicError,
    FieldViolation,
    ResourceError,
    ResourceValidationError,
)
from src.domain.events import ResourceEvent
from src.domain.protocols import (
    LoggerProtocol,
    ResourceEventPublisher,
    ResourceRepository,
)
from src.domain.validators import (
    collect_resource_violations,
    find_duplicate_characteristic,
)
from src.domain.value_objects import Page, ResourceSnapshot


def _validation_failure(
    violations: list[FieldViolation],
) -> Failure[ResourceValidationError]:
    first = violations[0]
    return Failure(
        error=ResourceValidationError(
            code=ErrorCode.VALIDATION_FAILED,
            message=ResourceError.VALIDATION_FAILED,
            field=first.field,
            violations=tuple(violations),
        )
    )


def _duplicate_failure(
    specs: Sequence[CharacteristicSpec],
) -> Failure[DuplicateCharacteristicError] | None:
    duplicate = find_duplicate_characteristic(specs)
    if duplicate is None:
        return None
    code, characteristic_type = duplicate
    return Failure(
        error=DuplicateCharacteristicError(
            code=ErrorCode.DUPLICATE_CHARACTERISTIC,
            message=(
                f"Duplicate characteristic: code={code}, "
                f"type={characteristic_type.value}"
            ),
            field="characteristics",
            characteristic_code=code,
            characteristic_type=characteristic_type.value,
        )
    )


def _not_found(resource_id: object) -> Failure[NotFoundError]:
    return Failure(
        error=NotFoundError(
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=f"{ResourceError.NOT_FOUND}: {resource_id}",
            resource_type="Resource",
            resource_id=str(resource_id),
        )
    )


def _to_characteristics(
    specs: Sequence[CharacteristicSpec],
) -> list[Characteristic]:
    return [
        Characteristic.create(
            code=spec.code,
            characteristic_type=spec.type,
            value=spec.value,
        )
        for spec in specs
    ]


class ResourceService:
    """Orchestrator for resource create/read/list/update/delete/export.

    Dependencies (injected via constructor):
        - ResourceRepository: Persistence with compare-and-swap save
        - ResourceEventPublisher: Best-effort event dispatch
        - LoggerProtocol: Structured logging

    Example:
        >>> result = await service.update_resource(
        ...     UpdateResource(resource_id=rid, expected_version=0, location=loc)
        ... )
        >>> match result:
        ...     case Success(value=snapshot):
        ...         print(snapshot.version)  # 1
        ...     case Failure(error=error):
        ...         print(error.code)
    """

    def __init__(
        self,
        resource_repo: ResourceRepository,
        event_publisher: ResourceEventPublisher,
        logger: LoggerProtocol,
        export_batch_size: int = EXPORT_BATCH_SIZE_DEFAULT,
        concurrency_guard: ConcurrencyGuard | None = None,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            resource_repo: Resource persistence port.
            event_publisher: Resource event publishing port.
            logger: Structured logger.
            export_batch_size: Snapshots per bulk export batch.
            concurrency_guard: Version check (default: ConcurrencyGuard()).
        """
        self._resource_repo = resource_repo
        self._event_publisher = event_publisher
        self._logger = logger
        self._export_batch_size = export_batch_size
        self._guard = concurrency_guard or ConcurrencyGuard()

    # =========================================================================
    # Commands
    # =========================================================================

    async def create_resource(
        self, command: CreateResource
    ) -> Result[ResourceSnapshot, DomainError]:
        """Validate, persist and announce a new resource.

        Nothing is persisted and no event is published when validation fails.

        Args:
            command: CreateResource command.

        Returns:
            Success(ResourceSnapshot) at version 0.
            Failure(ResourceValidationError) if any field is malformed.
            Failure(DuplicateCharacteristicError) if a (code, type) repeats.
            Failure(IntegrityViolationError) if storage rejects the insert.
        """
        self._logger.info(
            "resource_create_started",
            resource_type=command.resource_type.value,
            country_code=command.country_code,
        )

        violations = collect_resource_violations(
            country_code=command.country_code,
            location=command.location,
            characteristics=command.characteristics,
        )
        if violations:
            self._log_rejected("create", violations=violations)
            return _validation_failure(violations)

        if command.characteristics:
            duplicate = _duplicate_failure(command.characteristics)
            if duplicate is not None:
                self._log_rejected("create", error=duplicate.error)
                return duplicate

        resource = Resource.create(
            resource_type=command.resource_type,
            country_code=command.country_code,
            location=command.location,
        )
        for characteristic in _to_characteristics(command.characteristics):
            resource.add_characteristic(characteristic)

        save_result = await self._resource_repo.save(resource)
        if isinstance(save_result, Failure):
            self._log_rejected("create", error=save_result.error)
            return save_result

        snapshot = ResourceSnapshot.from_entity(save_result.value)
        self._logger.info(
            "resource_created",
            resource_id=str(snapshot.id),
            version=snapshot.version,
            characteristic_count=len(snapshot.characteristics),
        )
        await self._publish(ResourceEventType.RESOURCE_CREATED, snapshot)
        return Success(value=snapshot)

    async def update_resource(
        self, command: UpdateResource
    ) -> Result[ResourceSnapshot, DomainError]:
        """Apply location and/or characteristic changes under version control.

        A supplied location replaces the old one wholesale. A supplied
        characteristics tuple replaces the whole set (an empty tuple clears
        it). Parts left as None are untouched.

        Args:
            command: UpdateResource command.

        Returns:
            Success(ResourceSnapshot) with version incremented by one.
            Failure(NotFoundError) if the resource does not exist.
            Failure(ConcurrencyConflictError) if the version is stale.
            Failure(ResourceValidationError | DuplicateCharacteristicError)
                if supplied parts are invalid.
        """
        resource = await self._resource_repo.find_by_id_with_characteristics(
            command.resource_id
        )
        if resource is None:
            return _not_found(command.resource_id)

        guard_result = self._guard.check(
            supplied_version=command.expected_version,
            current_version=resource.version,
            resource_id=resource.id,
        )
        if isinstance(guard_result, Failure):
            self._log_rejected("update", error=guard_result.error)
            return guard_result

        violations = collect_resource_violations(
            country_code=None,
            location=command.location,
            characteristics=command.characteristics,
        )
        if violations:
            self._log_rejected("update", violations=violations)
            return _validation_failure(violations)

        if command.characteristics:
            duplicate = _duplicate_failure(command.characteristics)
            if duplicate is not None:
                self._log_rejected("update", error=duplicate.error)
                return duplicate

        if command.location is not None:
            resource.change_location(command.location)
        if command.characteristics is not None:
            resource.replace_characteristics(
                _to_characteristics(command.characteristics)
            )

        save_result = await self._resource_repo.save(resource)
        if isinstance(save_result, Failure):
            self._log_rejected("update", error=save_result.error)
            return save_result

        snapshot = ResourceSnapshot.from_entity(save_result.value)
        self._logger.info(
            "resource_updated",
            resource_id=str(snapshot.id),
            version=snapshot.version,
            location_changed=command.location is not None,
            characteristics_replaced=command.characteristics is not None,
        )
        await self._publish(ResourceEventType.RESOURCE_UPDATED, snapshot)
        return Success(value=snapshot)

    async def delete_resource(
        self, command: DeleteResource
    ) -> Result[ResourceSnapshot, DomainError]:
        """Delete a resource and announce it with its pre-deletion snapshot.

        Args:
            command: DeleteResource command.

        Returns:
            Success(ResourceSnapshot) of the deleted resource.
            Failure(NotFoundError) if it does not exist (no event published).
        """
        resource = await self._resource_repo.find_by_id(command.resource_id)
        if resource is None:
            return _not_found(command.resource_id)

        snapshot = ResourceSnapshot.from_entity(resource)
        await self._resource_repo.delete(resource)

        self._logger.info("resource_deleted", resource_id=str(snapshot.id))
        await self._publish(ResourceEventType.RESOURCE_DELETED, snapshot)
        return Success(value=snapshot)

    async def export_all(
        self, command: ExportAllResources | None = None
    ) -> Result[ExportResult, DomainError]:
        """Publish every resource as consecutive batches.

        Batches are handed to the publisher in storage order; only the last
        batch may be short. Transport failures are logged, not retried.

        Args:
            command: Optional ExportAllResources (batch size override).

        Returns:
            Success(ExportResult) describing what was dispatched.
        """
        batch_size = (
            command.batch_size
            if command is not None and command.batch_size
            else self._export_batch_size
        )
        job_id = uuid7()

        resources = await self._resource_repo.find_all_with_characteristics()
        snapshots = [ResourceSnapshot.from_entity(r) for r in resources]

        self._logger.info(
            "resource_export_started",
            job_id=str(job_id),
            total_resources=len(snapshots),
            batch_size=batch_size,
        )

        batch_count = 0
        try:
            batch_count = await self._event_publisher.publish_batch(
                snapshots, batch_size
            )
        except Exception as e:
            self._logger.error(
                "resource_export_publish_failed",
                error=e,
                job_id=str(job_id),
                total_resources=len(snapshots),
            )
        else:
            self._logger.info(
                "resource_export_completed",
                job_id=str(job_id),
                total_resources=len(snapshots),
                batch_count=batch_count,
            )

        return Success(
            value=ExportResult(
                job_id=job_id,
                total_resources=len(snapshots),
                batch_count=batch_count,
                batch_size=batch_size,
            )
        )

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_resource(
        self, query: GetResource
    ) -> Result[ResourceSnapshot, DomainError]:
        """Fetch one resource with its characteristics.

        Args:
            query: GetResource query.

        Returns:
            Success(ResourceSnapshot) or Failure(NotFoundError).
        """
        resource = await self._resource_repo.find_by_id_with_characteristics(
            query.resource_id
        )
        if resource is None:
            return _not_found(query.resource_id)
        return Success(value=ResourceSnapshot.from_entity(resource))

    async def list_resources(
        self, query: ListResources
    ) -> Result[Page[ResourceSnapshot], DomainError]:
        """List resources filtered by country and/or type.

        Args:
            query: ListResources query.

        Returns:
            Success(Page[ResourceSnapshot]).
        """
        page_request = query.page_request
        country_code = query.country_code
        resource_type = query.resource_type

        if country_code is not None and resource_type is not None:
            page = await self._resource_repo.find_by_country_code_and_type(
                country_code, resource_type, page_request
            )
        elif country_code is not None:
            page = await self._resource_repo.find_by_country_code(
                country_code, page_request
            )
        elif resource_type is not None:
            page = await self._resource_repo.find_by_type(resource_type, page_request)
        else:
            page = await self._resource_repo.find_all(page_request)

        return Success(value=page.map(ResourceSnapshot.from_entity))

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _publish(
        self, event_type: ResourceEventType, snapshot: ResourceSnapshot
    ) -> None:
        """Publish a resource event; never lets a failure escape."""
        event = ResourceEvent.for_snapshot(event_type, snapshot)
        try:
            await self._event_publisher.publish(event)
        except Exception as e:
            self._logger.error(
                "resource_event_publish_failed",
                error=e,
                event_id=str(event.event_id),
                event_type=event_type.value,
                resource_id=str(snapshot.id),
            )

    def _log_rejected(
        self,
        operation: str,
        *,
        error: DomainError | None = None,
        violations: list[FieldViolation] | None = None,
    ) -> None:
        context: dict[str, object] = {"operation": operation}
        if error is not None:
            context.update(error.log_fields())
        if violations:
            context["error_code"] = ErrorCode.VALIDATION_FAILED.value
            context["fields"] = [v.field for v in violations]
        self._logger.warning("resource_request_rejected", **context)
