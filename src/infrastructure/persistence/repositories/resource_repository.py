"""ResourceRepository - SQLAlchemy implementation of ResourceRepository protocol.

Adapter for hexagonal architecture.
Maps between the domain Resource aggregate and the resources/characteristics
tables.

Optimistic Locking:
    Updates are issued as
        UPDATE resources SET ..., version = :v + 1
        WHERE id = :id AND version = :v
    and a zero row count means another writer got there first. The version
    check and the write happen in one statement, so two writers starting
    from the same version cannot both succeed.

Characteristics:
    Child rows are diff-applied by id: rows whose id is gone from the
    aggregate are deleted first, then new ones are inserted. An update that
    leaves characteristics untouched rewrites no child rows, and deletes
    precede inserts so a replaced (code, type) pair never trips the unique
    constraint mid-transaction.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import Select, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.characteristic import Characteristic
from src.domain.entities.resource import Resource
from src.domain.enums import CharacteristicType, ResourceType
from src.domain.errors import (
    ConcurrencyConflictError,
    IntegrityViolationError,
    ResourceError,
)
from src.domain.value_objects import Location, Page, PageRequest
from src.infrastructure.persistence.models.characteristic import (
    UNIQUE_CODE_TYPE_CONSTRAINT,
)
from src.infrastructure.persistence.models.characteristic import (
    Characteristic as CharacteristicModel,
)
from src.infrastructure.persistence.models.resource import Resource as ResourceModel

_SORT_COLUMNS: dict[str, Any] = {
    "created_at": ResourceModel.created_at,
    "updated_at": ResourceModel.updated_at,
    "country_code": ResourceModel.country_code,
    "type": ResourceModel.type,
}


class ResourceRepository:
    """SQLAlchemy implementation of ResourceRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = ResourceRepository(session)
        ...     resource = await repo.find_by_id_with_characteristics(resource_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    # =========================================================================
    # Single-resource lookups
    # =========================================================================

    async def find_by_id(self, resource_id: UUID) -> Resource | None:
        """Find resource by ID.

        Args:
            resource_id: Resource's unique identifier.

        Returns:
            Domain Resource entity if found, None otherwise.
        """
        stmt = select(ResourceModel).where(ResourceModel.id == resource_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_id_with_characteristics(
        self, resource_id: UUID
    ) -> Resource | None:
        """Find resource by ID with characteristics eagerly loaded.

        Args:
            resource_id: Resource's unique identifier.

        Returns:
            Domain Resource entity if found, None otherwise.
        """
        stmt = (
            select(ResourceModel)
            .options(selectinload(ResourceModel.characteristics))
            .where(ResourceModel.id == resource_id)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    # =========================================================================
    # Paginated listings
    # =========================================================================

    async def find_by_country_code_and_type(
        self,
        country_code: str,
        resource_type: ResourceType,
        page_request: PageRequest,
    ) -> Page[Resource]:
        """Find resources matching both country and type.

        Args:
            country_code: ISO 3166-1 alpha-2 code.
            resource_type: Resource classification.
            page_request: Requested page and ordering.

        Returns:
            Page of domain Resource entities.
        """
        return await self._find_page(
            page_request,
            ResourceModel.country_code == country_code,
            ResourceModel.type == resource_type.value,
        )

    async def find_by_country_code(
        self, country_code: str, page_request: PageRequest
    ) -> Page[Resource]:
        """Find resources in a country."""
        return await self._find_page(
            page_request, ResourceModel.country_code == country_code
        )

    async def find_by_type(
        self, resource_type: ResourceType, page_request: PageRequest
    ) -> Page[Resource]:
        """Find resources of a type."""
        return await self._find_page(
            page_request, ResourceModel.type == resource_type.value
        )

    async def find_all(self, page_request: PageRequest) -> Page[Resource]:
        """Find one page of all resources."""
        return await self._find_page(page_request)

    async def find_all_with_characteristics(self) -> list[Resource]:
        """Load every resource with characteristics, oldest first.

        Returns:
            List of domain Resource entities.
        """
        stmt = (
            select(ResourceModel)
            .options(selectinload(ResourceModel.characteristics))
            .order_by(ResourceModel.created_at.asc(), ResourceModel.id.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def count(self) -> int:
        """Count stored resources."""
        stmt = select(func.count()).select_from(ResourceModel)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    # =========================================================================
    # Writes
    # =========================================================================

    async def save(self, resource: Resource) -> Result[Resource, DomainError]:
        """Insert a new resource or compare-and-swap an existing one.

        On success the entity's version and timestamps are updated in place
        to what was stored.

        Args:
            resource: Resource aggregate to persist.

        Returns:
            Success(Resource) with refreshed version.
            Failure(ConcurrencyConflictError) if the stored version moved on.
            Failure(IntegrityViolationError) if a constraint was breached.
        """
        now = datetime.now(UTC)
        is_new = resource.is_new

        try:
            if resource.version is None:
                await self._insert(resource, now)
                new_version = 0
            else:
                expected = resource.version
                rowcount = await self._compare_and_swap(resource, expected, now)
                if rowcount == 0:
                    await self.session.rollback()
                    current = await self._current_version(resource.id)
                    return Failure(
                        error=self._concurrency_conflict(resource.id, expected, current)
                    )
                await self._sync_characteristics(resource, now)
                new_version = expected + 1

            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            return Failure(error=self._integrity_violation(resource.id, e))

        # Detach stale ORM state so later reads see the committed rows
        self.session.expunge_all()

        if is_new:
            resource.created_at = now
        resource.updated_at = now
        resource.version = new_version
        return Success(value=resource)

    async def delete(self, resource: Resource) -> None:
        """Delete resource and its characteristics.

        Children are removed explicitly so deletion does not rely on the
        database enforcing ON DELETE CASCADE.

        Args:
            resource: Previously loaded resource.
        """
        await self.session.execute(
            delete(CharacteristicModel).where(
                CharacteristicModel.resource_id == resource.id
            )
        )
        await self.session.execute(
            delete(ResourceModel).where(ResourceModel.id == resource.id)
        )
        await self.session.commit()
        self.session.expunge_all()

    # =========================================================================
    # Write helpers
    # =========================================================================

    async def _insert(self, resource: Resource, now: datetime) -> None:
        await self.session.execute(
            insert(ResourceModel).values(
                id=resource.id,
                type=resource.type.value,
                country_code=resource.country_code,
                **self._location_columns(resource.location),
                version=0,
                created_at=now,
                updated_at=now,
            )
        )
        await self._insert_characteristics(
            resource, list(enumerate(resource.characteristics)), now
        )

    async def _compare_and_swap(
        self, resource: Resource, expected: int, now: datetime
    ) -> int:
        stmt = (
            update(ResourceModel)
            .where(
                ResourceModel.id == resource.id,
                ResourceModel.version == expected,
            )
            .values(
                **self._location_columns(resource.location),
                version=expected + 1,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return int(result.rowcount or 0)  # type: ignore[attr-defined]

    async def _sync_characteristics(self, resource: Resource, now: datetime) -> None:
        stmt = select(CharacteristicModel.id, CharacteristicModel.position).where(
            CharacteristicModel.resource_id == resource.id
        )
        stored = {row.id: row.position for row in (await self.session.execute(stmt))}
        wanted = {c.id: index for index, c in enumerate(resource.characteristics)}

        removed = [cid for cid in stored if cid not in wanted]
        if removed:
            await self.session.execute(
                delete(CharacteristicModel).where(CharacteristicModel.id.in_(removed))
            )

        for cid, position in wanted.items():
            if cid in stored and stored[cid] != position:
                await self.session.execute(
                    update(CharacteristicModel)
                    .where(CharacteristicModel.id == cid)
                    .values(position=position)
                    .execution_options(synchronize_session=False)
                )

        added = [
            (index, c)
            for index, c in enumerate(resource.characteristics)
            if c.id not in stored
        ]
        await self._insert_characteristics(resource, added, now)

    async def _insert_characteristics(
        self,
        resource: Resource,
        indexed: list[tuple[int, Characteristic]],
        now: datetime,
    ) -> None:
        if not indexed:
            return
        await self.session.execute(
            insert(CharacteristicModel),
            [
                {
                    "id": c.id,
                    "resource_id": resource.id,
                    "code": c.code,
                    "type": c.type.value,
                    "value": c.value,
                    "position": index,
                    "created_at": now,
                }
                for index, c in indexed
            ],
        )

    async def _current_version(self, resource_id: UUID) -> int | None:
        stmt = select(ResourceModel.version).where(ResourceModel.id == resource_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    # =========================================================================
    # Query helpers
    # =========================================================================

    async def _find_page(
        self, page_request: PageRequest, *criteria: Any
    ) -> Page[Resource]:
        count_stmt = select(func.count()).select_from(ResourceModel).where(*criteria)
        total = int((await self.session.execute(count_stmt)).scalar_one())

        stmt: Select[tuple[ResourceModel]] = (
            select(ResourceModel)
            .where(*criteria)
            .order_by(*self._order_by(page_request))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        result = await self.session.execute(stmt)
        return Page(
            items=[self._to_domain(model) for model in result.scalars().all()],
            page=page_request.page,
            size=page_request.size,
            total_items=total,
        )

    @staticmethod
    def _order_by(page_request: PageRequest) -> list[Any]:
        column = _SORT_COLUMNS[page_request.sort_by]
        if page_request.descending:
            return [column.desc(), ResourceModel.id.desc()]
        return [column.asc(), ResourceModel.id.asc()]

    # =========================================================================
    # Error construction
    # =========================================================================

    @staticmethod
    def _concurrency_conflict(
        resource_id: UUID, expected: int, current: int | None
    ) -> ConcurrencyConflictError:
        return ConcurrencyConflictError(
            code=ErrorCode.CONCURRENT_UPDATE,
            message=ResourceError.CONCURRENT_UPDATE,
            resource_type="Resource",
            conflicting_field="version",
            expected_version=expected,
            current_version=current,
            details={
                "resource_id": str(resource_id),
                "expected_version": str(expected),
                "current_version": str(current),
            },
        )

    @staticmethod
    def _integrity_violation(
        resource_id: UUID, error: IntegrityError
    ) -> IntegrityViolationError:
        raw = str(error.orig)
        is_duplicate = (
            UNIQUE_CODE_TYPE_CONSTRAINT in raw
            or "characteristics.resource_id, characteristics.code" in raw
        )
        if is_duplicate:
            return IntegrityViolationError(
                code=ErrorCode.DATA_INTEGRITY_VIOLATION,
                message=ResourceError.DUPLICATE_CHARACTERISTIC_KEY,
                resource_type="Characteristic",
                conflicting_field="code,type",
                constraint=UNIQUE_CODE_TYPE_CONSTRAINT,
                details={"resource_id": str(resource_id)},
            )
        return IntegrityViolationError(
            code=ErrorCode.DATA_INTEGRITY_VIOLATION,
            message="Data integrity violation",
            resource_type="Resource",
            details={"resource_id": str(resource_id)},
        )

    # =========================================================================
    # Entity <-> Model Mapping (Private Methods)
    # =========================================================================

    @staticmethod
    def _location_columns(location: Location) -> dict[str, str]:
        return {
            "street_address": location.street_address,
            "city": location.city,
            "postal_code": location.postal_code,
            "location_country_code": location.country_code,
        }

    def _to_domain(self, model: ResourceModel) -> Resource:
        """Convert database model to domain entity.

        Args:
            model: SQLAlchemy Resource model with characteristics loaded.

        Returns:
            Domain Resource aggregate.
        """
        resource = Resource(
            id=model.id,
            type=ResourceType(model.type),
            country_code=model.country_code,
            location=Location(
                street_address=model.street_address,
                city=model.city,
                postal_code=model.postal_code,
                country_code=model.location_country_code,
            ),
            created_at=model.created_at,
            updated_at=model.updated_at,
            version=model.version,
        )
        for child in sorted(model.characteristics, key=lambda c: c.position):
            resource.add_characteristic(
                Characteristic(
                    id=child.id,
                    code=child.code,
                    type=CharacteristicType(child.type),
                    value=child.value,
                )
            )
        return resource
