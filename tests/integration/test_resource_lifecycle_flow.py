"""Integration tests for resource lifecycle through ResourceService.

Real repository (SQLite) and the in-memory publisher, so the tests observe
both what is stored and what is announced. A recording subscriber captures
deliveries; each test drains the publisher before asserting on them.

Scenarios:
- create → version 0, one RESOURCE_CREATED
- duplicate (code, type) on create → nothing stored, nothing published
- N updates → version N, N RESOURCE_UPDATED in order
- location-only update → characteristics untouched (same ids)
- stale If-Match version → conflict, nothing stored, nothing published
- delete → RESOURCE_DELETED carries the pre-deletion snapshot
- export 250 resources → batches of 100, 100, 50
- sample seeding is idempotent
"""

import pytest

from src.application.commands import (
    CreateResource,
    DeleteResource,
    ExportAllResources,
    UpdateResource,
)
from src.application.queries import GetResource, ListResources
from src.application.services.resource_service import ResourceService
from src.core.constants import BULK_EXPORT_KEY
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import CharacteristicType, ResourceEventType, ResourceType
from src.domain.errors import ConcurrencyConflictError, DuplicateCharacteristicError
from src.domain.events import ResourceEvent, ResourceExportBatch
from src.infrastructure.events import InMemoryResourceEventPublisher
from src.infrastructure.persistence.repositories import ResourceRepository
from src.infrastructure.persistence.seeds import SAMPLE_RESOURCES, seed_sample_resources
from tests.conftest import create_location, create_spec


def _create_command(country_code: str = "EE") -> CreateResource:
    return CreateResource(
        resource_type=ResourceType.METERING_POINT,
        country_code=country_code,
        location=create_location(country_code=country_code),
        characteristics=(
            create_spec("CONS1"),
            create_spec("CP001", CharacteristicType.CHARGING_POINT, "22kW"),
        ),
    )


class EventRecorder:
    """Subscriber collecting every event and export batch it receives."""

    def __init__(self, publisher: InMemoryResourceEventPublisher) -> None:
        self.publisher = publisher
        self.events: list[ResourceEvent] = []
        self.batches: list[ResourceExportBatch] = []
        publisher.subscribe(self._on_event)
        publisher.subscribe_batches(self._on_batch)

    async def _on_event(self, event: ResourceEvent) -> None:
        self.events.append(event)

    async def _on_batch(self, batch: ResourceExportBatch) -> None:
        self.batches.append(batch)

    async def settle(self) -> None:
        await self.publisher.drain()


@pytest.fixture
def publisher(mock_logger):
    return InMemoryResourceEventPublisher(logger=mock_logger)


@pytest.fixture
def recorder(publisher):
    return EventRecorder(publisher)


async def _service(session, publisher, mock_logger) -> ResourceService:
    return ResourceService(
        resource_repo=ResourceRepository(session),
        event_publisher=publisher,
        logger=mock_logger,
        export_batch_size=100,
    )


@pytest.mark.integration
class TestResourceLifecycle:
    """End-to-end service flows on a real database."""

    async def test_create_then_get(self, database, publisher, recorder, mock_logger):
        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)

            created = await service.create_resource(_create_command())
            fetched = await service.get_resource(
                GetResource(resource_id=created.value.id)
            )
        await recorder.settle()

        assert isinstance(created, Success)
        assert created.value.version == 0
        assert fetched.value.id == created.value.id
        assert [c.code for c in fetched.value.characteristics] == ["CONS1", "CP001"]
        assert [e.event_type for e in recorder.events] == [
            ResourceEventType.RESOURCE_CREATED
        ]

    async def test_duplicate_characteristic_stores_nothing(
        self, database, publisher, recorder, mock_logger
    ):
        command = CreateResource(
            resource_type=ResourceType.METERING_POINT,
            country_code="EE",
            location=create_location(),
            characteristics=(
                create_spec("DUP01", value="RESIDENTIAL"),
                create_spec("DUP01", value="COMMERCIAL"),
            ),
        )

        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)
            result = await service.create_resource(command)

        async with database.get_session() as session:
            stored = await ResourceRepository(session).count()
        await recorder.settle()

        assert isinstance(result, Failure)
        assert isinstance(result.error, DuplicateCharacteristicError)
        assert result.error.code == ErrorCode.DUPLICATE_CHARACTERISTIC
        assert result.error.characteristic_code == "DUP01"
        assert result.error.characteristic_type == "CONSUMPTION_TYPE"
        assert stored == 0
        assert recorder.events == []

    async def test_n_updates_reach_version_n(
        self, database, publisher, recorder, mock_logger
    ):
        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)
            created = await service.create_resource(_create_command())
            resource_id = created.value.id

            version = created.value.version
            for n in range(1, 6):
                result = await service.update_resource(
                    UpdateResource(
                        resource_id=resource_id,
                        expected_version=version,
                        location=create_location(postal_code=f"1000{n}"),
                    )
                )
                assert isinstance(result, Success)
                version = result.value.version
                assert version == n
        await recorder.settle()

        updates = [
            e
            for e in recorder.events
            if e.event_type == ResourceEventType.RESOURCE_UPDATED
        ]
        assert [e.resource.version for e in updates] == [1, 2, 3, 4, 5]
        assert all(e.key == str(resource_id) for e in updates)

    async def test_location_only_update_keeps_characteristics(
        self, database, publisher, recorder, mock_logger
    ):
        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)
            created = await service.create_resource(_create_command())

        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)
            updated = await service.update_resource(
                UpdateResource(
                    resource_id=created.value.id,
                    location=create_location(city="Tartu"),
                )
            )

        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)
            reloaded = await service.get_resource(
                GetResource(resource_id=created.value.id)
            )

        assert updated.value.version == 1
        assert reloaded.value.location.city == "Tartu"
        assert reloaded.value.characteristics == created.value.characteristics
        assert [c.id for c in reloaded.value.characteristics] == [
            c.id for c in created.value.characteristics
        ]

    async def test_stale_version_is_rejected(
        self, database, publisher, recorder, mock_logger
    ):
        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)
            created = await service.create_resource(_create_command())
            resource_id = created.value.id
            await service.update_resource(
                UpdateResource(
                    resource_id=resource_id,
                    expected_version=0,
                    location=create_location(city="Tartu"),
                )
            )
            await recorder.settle()
            published_before = len(recorder.events)

            result = await service.update_resource(
                UpdateResource(
                    resource_id=resource_id,
                    expected_version=0,
                    location=create_location(city="Narva"),
                )
            )
            current = await service.get_resource(GetResource(resource_id=resource_id))
        await recorder.settle()

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConcurrencyConflictError)
        assert current.value.location.city == "Tartu"
        assert current.value.version == 1
        assert len(recorder.events) == published_before

    async def test_clearing_characteristics(self, database, publisher, mock_logger):
        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)
            created = await service.create_resource(_create_command())

            result = await service.update_resource(
                UpdateResource(resource_id=created.value.id, characteristics=())
            )
            fetched = await service.get_resource(
                GetResource(resource_id=created.value.id)
            )

        assert result.value.characteristics == ()
        assert fetched.value.characteristics == ()

    async def test_delete_announces_last_state(
        self, database, publisher, recorder, mock_logger
    ):
        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)
            created = await service.create_resource(_create_command())
            resource_id = created.value.id

            deleted = await service.delete_resource(
                DeleteResource(resource_id=resource_id)
            )
            after = await service.get_resource(GetResource(resource_id=resource_id))
        await recorder.settle()

        assert isinstance(deleted, Success)
        assert isinstance(after, Failure)
        event = recorder.events[-1]
        assert event.event_type == ResourceEventType.RESOURCE_DELETED
        assert event.resource.id == resource_id
        assert len(event.resource.characteristics) == 2

    async def test_list_filters_by_country(self, database, publisher, mock_logger):
        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)
            await service.create_resource(_create_command("EE"))
            await service.create_resource(_create_command("FI"))

            result = await service.list_resources(ListResources(country_code="FI"))

        assert result.value.total_items == 1
        assert result.value.items[0].country_code == "FI"

    async def test_export_250_resources(
        self, database, publisher, recorder, mock_logger
    ):
        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)
            for _ in range(250):
                await service.create_resource(_create_command())

            result = await service.export_all(ExportAllResources())
        await recorder.settle()

        assert result.value.total_resources == 250
        assert result.value.batch_count == 3
        batches = recorder.batches
        assert [b.batch_index for b in batches] == [0, 1, 2]
        assert [len(b.resources) for b in batches] == [100, 100, 50]
        assert all(b.key == BULK_EXPORT_KEY for b in batches)
        exported_ids = [s.id for b in batches for s in b.resources]
        created_ids = [e.resource_id for e in recorder.events]
        assert exported_ids == created_ids

    async def test_export_empty_catalog(
        self, database, publisher, recorder, mock_logger
    ):
        async with database.get_session() as session:
            service = await _service(session, publisher, mock_logger)

            result = await service.export_all()
        await recorder.settle()

        assert result.value.total_resources == 0
        assert result.value.batch_count == 0
        assert recorder.batches == []


@pytest.mark.integration
class TestSampleSeeding:
    """Test startup seeding."""

    async def test_seeds_empty_catalog_once(self, database, mock_logger):
        async with database.get_session() as session:
            repo = ResourceRepository(session)

            first = await seed_sample_resources(repo, mock_logger)
            second = await seed_sample_resources(repo, mock_logger)
            count = await repo.count()

        assert first == len(SAMPLE_RESOURCES)
        assert second == 0
        assert count == len(SAMPLE_RESOURCES)
