"""Unit tests for ResourceService.

Tests cover:
- create: validation, duplicate detection, persistence, event publication
- update: not found, version guard, partial updates, characteristic clearing
- delete: pre-deletion snapshot in the event
- get/list: query dispatch to the matching repository finder
- export: batching through the publisher, failures logged not raised
- Publish failures never change the caller's outcome

Architecture:
- Unit tests with mocked repository and publisher ports
- Async tests using pytest-asyncio
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands import (
    CreateResource,
    DeleteResource,
    ExportAllResources,
    UpdateResource,
)
from src.application.queries import GetResource, ListResources
from src.application.services.resource_service import ResourceService
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.enums import CharacteristicType, ResourceEventType, ResourceType
from src.domain.errors import (
    ConcurrencyConflictError,
    DuplicateCharacteristicError,
    IntegrityViolationError,
    ResourceError,
    ResourceValidationError,
)
from src.domain.events import ResourceEvent
from src.domain.protocols import ResourceEventPublisher, ResourceRepository
from src.domain.value_objects import Page, PageRequest
from tests.conftest import create_location, create_resource, create_spec


# =============================================================================
# Fixtures
# =============================================================================


async def _persist(resource):
    """Mimic the repository's versioning on save."""
    resource.version = 0 if resource.version is None else resource.version + 1
    return Success(value=resource)


@pytest.fixture
def mock_repo():
    repo = AsyncMock(spec=ResourceRepository)
    repo.save.side_effect = _persist
    return repo


@pytest.fixture
def mock_publisher():
    publisher = AsyncMock(spec=ResourceEventPublisher)
    publisher.publish_batch.return_value = 0
    return publisher


@pytest.fixture
def service(mock_repo, mock_publisher, mock_logger):
    return ResourceService(
        resource_repo=mock_repo,
        event_publisher=mock_publisher,
        logger=mock_logger,
        export_batch_size=100,
    )


def _create_command(**overrides) -> CreateResource:
    values = {
        "resource_type": ResourceType.METERING_POINT,
        "country_code": "EE",
        "location": create_location(),
        "characteristics": (
            create_spec("CONS1"),
            create_spec("CP001", CharacteristicType.CHARGING_POINT, "22kW"),
        ),
    }
    values.update(overrides)
    return CreateResource(**values)


def _published_event(mock_publisher) -> ResourceEvent:
    mock_publisher.publish.assert_awaited_once()
    return mock_publisher.publish.await_args.args[0]


# =============================================================================
# Create
# =============================================================================


@pytest.mark.unit
class TestCreateResource:
    """Test ResourceService.create_resource."""

    async def test_create_persists_and_returns_version_zero(
        self, service, mock_repo
    ):
        # Act
        result = await service.create_resource(_create_command())

        # Assert
        assert isinstance(result, Success)
        snapshot = result.value
        assert snapshot.version == 0
        assert snapshot.type == ResourceType.METERING_POINT
        assert [c.code for c in snapshot.characteristics] == ["CONS1", "CP001"]
        mock_repo.save.assert_awaited_once()

    async def test_create_publishes_created_event(self, service, mock_publisher):
        result = await service.create_resource(_create_command())

        event = _published_event(mock_publisher)
        assert event.event_type == ResourceEventType.RESOURCE_CREATED
        assert event.resource_id == result.value.id
        assert event.resource == result.value

    async def test_create_without_characteristics(self, service):
        result = await service.create_resource(_create_command(characteristics=()))

        assert isinstance(result, Success)
        assert result.value.characteristics == ()

    async def test_invalid_fields_fail_without_side_effects(
        self, service, mock_repo, mock_publisher
    ):
        """Test every violation is reported and nothing is saved or published."""
        command = _create_command(
            country_code="ee",
            location=create_location(city=""),
            characteristics=(create_spec(code="bad-1"),),
        )

        result = await service.create_resource(command)

        assert isinstance(result, Failure)
        error = result.error
        assert isinstance(error, ResourceValidationError)
        assert error.code == ErrorCode.VALIDATION_FAILED
        assert {v.field for v in error.violations} == {
            "country_code",
            "location.city",
            "characteristics[0].code",
        }
        mock_repo.save.assert_not_awaited()
        mock_publisher.publish.assert_not_awaited()

    async def test_duplicate_characteristic_rejected(
        self, service, mock_repo, mock_publisher
    ):
        command = _create_command(
            characteristics=(
                create_spec("CONS1"),
                create_spec("CP001", CharacteristicType.CHARGING_POINT),
                create_spec("CONS1", value="OTHER"),
            )
        )

        result = await service.create_resource(command)

        assert isinstance(result, Failure)
        error = result.error
        assert isinstance(error, DuplicateCharacteristicError)
        assert error.code == ErrorCode.DUPLICATE_CHARACTERISTIC
        assert error.characteristic_code == "CONS1"
        assert error.characteristic_type == "CONSUMPTION_TYPE"
        assert "CONS1" in error.message
        mock_repo.save.assert_not_awaited()
        mock_publisher.publish.assert_not_awaited()

    async def test_storage_failure_is_returned_and_not_announced(
        self, service, mock_repo, mock_publisher
    ):
        integrity_error = IntegrityViolationError(
            code=ErrorCode.DATA_INTEGRITY_VIOLATION,
            message=ResourceError.DUPLICATE_CHARACTERISTIC_KEY,
            resource_type="Characteristic",
        )
        mock_repo.save.side_effect = None
        mock_repo.save.return_value = Failure(error=integrity_error)

        result = await service.create_resource(_create_command())

        assert isinstance(result, Failure)
        assert result.error is integrity_error
        mock_publisher.publish.assert_not_awaited()

    async def test_publish_failure_does_not_fail_create(
        self, service, mock_publisher, mock_logger
    ):
        """Test a broken transport is logged and the resource still returned."""
        mock_publisher.publish.side_effect = ConnectionError("broker down")

        result = await service.create_resource(_create_command())

        assert isinstance(result, Success)
        mock_logger.error.assert_called_once()
        args, kwargs = mock_logger.error.call_args
        assert args[0] == "resource_event_publish_failed"
        assert isinstance(kwargs["error"], ConnectionError)
        assert kwargs["event_type"] == "RESOURCE_CREATED"


# =============================================================================
# Update
# =============================================================================


@pytest.mark.unit
class TestUpdateResource:
    """Test ResourceService.update_resource."""

    async def test_update_location_increments_version(
        self, service, mock_repo, mock_publisher
    ):
        # Arrange
        resource = create_resource(
            characteristics=[("CONS1", CharacteristicType.CONSUMPTION_TYPE, "R")],
            version=0,
        )
        mock_repo.find_by_id_with_characteristics.return_value = resource
        new_location = create_location(street_address="Tartu mnt 2")

        # Act
        result = await service.update_resource(
            UpdateResource(
                resource_id=resource.id, expected_version=0, location=new_location
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.version == 1
        assert result.value.location == new_location
        assert [c.code for c in result.value.characteristics] == ["CONS1"]
        event = _published_event(mock_publisher)
        assert event.event_type == ResourceEventType.RESOURCE_UPDATED

    async def test_update_missing_resource_returns_not_found(
        self, service, mock_repo, mock_publisher
    ):
        mock_repo.find_by_id_with_characteristics.return_value = None
        resource_id = uuid7()

        result = await service.update_resource(
            UpdateResource(resource_id=resource_id, location=create_location())
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND
        assert result.error.resource_id == str(resource_id)
        mock_publisher.publish.assert_not_awaited()

    async def test_stale_version_rejected_before_mutation(
        self, service, mock_repo, mock_publisher
    ):
        resource = create_resource(version=4)
        original_location = resource.location
        mock_repo.find_by_id_with_characteristics.return_value = resource

        result = await service.update_resource(
            UpdateResource(
                resource_id=resource.id,
                expected_version=3,
                location=create_location(city="Narva"),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConcurrencyConflictError)
        assert resource.location == original_location
        mock_repo.save.assert_not_awaited()
        mock_publisher.publish.assert_not_awaited()

    async def test_without_expected_version_update_proceeds(self, service, mock_repo):
        resource = create_resource(version=9)
        mock_repo.find_by_id_with_characteristics.return_value = resource

        result = await service.update_resource(
            UpdateResource(resource_id=resource.id, location=create_location())
        )

        assert isinstance(result, Success)
        assert result.value.version == 10

    async def test_repository_conflict_is_passed_through(
        self, service, mock_repo, mock_publisher
    ):
        """Test a writer slipping in between load and save surfaces as 409."""
        resource = create_resource(version=1)
        mock_repo.find_by_id_with_characteristics.return_value = resource
        conflict = ConcurrencyConflictError(
            code=ErrorCode.CONCURRENT_UPDATE,
            message=ResourceError.CONCURRENT_UPDATE,
            resource_type="Resource",
            expected_version=1,
            current_version=2,
        )
        mock_repo.save.side_effect = None
        mock_repo.save.return_value = Failure(error=conflict)

        result = await service.update_resource(
            UpdateResource(
                resource_id=resource.id, expected_version=1, location=create_location()
            )
        )

        assert isinstance(result, Failure)
        assert result.error is conflict
        mock_publisher.publish.assert_not_awaited()

    async def test_characteristics_replace_whole_set(self, service, mock_repo):
        resource = create_resource(
            characteristics=[
                ("OLD1", CharacteristicType.CONSUMPTION_TYPE, "a"),
                ("OLD2", CharacteristicType.CHARGING_POINT, "b"),
            ],
            version=0,
        )
        mock_repo.find_by_id_with_characteristics.return_value = resource

        result = await service.update_resource(
            UpdateResource(
                resource_id=resource.id,
                characteristics=(
                    create_spec("NEW1", CharacteristicType.CONNECTION_POINT_STATUS),
                ),
            )
        )

        assert isinstance(result, Success)
        assert [c.code for c in result.value.characteristics] == ["NEW1"]

    async def test_empty_characteristics_clear_the_set(self, service, mock_repo):
        resource = create_resource(
            characteristics=[("OLD1", CharacteristicType.CONSUMPTION_TYPE, "a")],
            version=0,
        )
        mock_repo.find_by_id_with_characteristics.return_value = resource

        result = await service.update_resource(
            UpdateResource(resource_id=resource.id, characteristics=())
        )

        assert isinstance(result, Success)
        assert result.value.characteristics == ()

    async def test_invalid_update_leaves_resource_untouched(self, service, mock_repo):
        resource = create_resource(version=0)
        mock_repo.find_by_id_with_characteristics.return_value = resource

        result = await service.update_resource(
            UpdateResource(
                resource_id=resource.id,
                location=create_location(postal_code=""),
                characteristics=(create_spec(value=""),),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ResourceValidationError)
        assert [v.field for v in result.error.violations] == [
            "location.postal_code",
            "characteristics[0].value",
        ]
        assert resource.location.postal_code == "10111"
        mock_repo.save.assert_not_awaited()

    async def test_duplicate_in_update_rejected(self, service, mock_repo):
        resource = create_resource(version=0)
        mock_repo.find_by_id_with_characteristics.return_value = resource

        result = await service.update_resource(
            UpdateResource(
                resource_id=resource.id,
                characteristics=(create_spec("A1"), create_spec("A1")),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, DuplicateCharacteristicError)
        mock_repo.save.assert_not_awaited()


# =============================================================================
# Delete
# =============================================================================


@pytest.mark.unit
class TestDeleteResource:
    """Test ResourceService.delete_resource."""

    async def test_delete_publishes_pre_deletion_snapshot(
        self, service, mock_repo, mock_publisher
    ):
        resource = create_resource(
            characteristics=[("CONS1", CharacteristicType.CONSUMPTION_TYPE, "R")],
            version=2,
        )
        mock_repo.find_by_id.return_value = resource

        result = await service.delete_resource(DeleteResource(resource_id=resource.id))

        assert isinstance(result, Success)
        mock_repo.delete.assert_awaited_once_with(resource)
        event = _published_event(mock_publisher)
        assert event.event_type == ResourceEventType.RESOURCE_DELETED
        assert event.resource.version == 2
        assert len(event.resource.characteristics) == 1

    async def test_delete_missing_resource_returns_not_found(
        self, service, mock_repo, mock_publisher
    ):
        mock_repo.find_by_id.return_value = None

        result = await service.delete_resource(DeleteResource(resource_id=uuid7()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        mock_repo.delete.assert_not_awaited()
        mock_publisher.publish.assert_not_awaited()


# =============================================================================
# Queries
# =============================================================================


@pytest.mark.unit
class TestResourceQueries:
    """Test get and list."""

    async def test_get_returns_snapshot(self, service, mock_repo):
        resource = create_resource(version=0)
        mock_repo.find_by_id_with_characteristics.return_value = resource

        result = await service.get_resource(GetResource(resource_id=resource.id))

        assert isinstance(result, Success)
        assert result.value.id == resource.id

    async def test_get_missing_returns_not_found(self, service, mock_repo):
        mock_repo.find_by_id_with_characteristics.return_value = None

        result = await service.get_resource(GetResource(resource_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND

    async def test_get_never_publishes(self, service, mock_repo, mock_publisher):
        mock_repo.find_by_id_with_characteristics.return_value = create_resource(
            version=0
        )

        await service.get_resource(GetResource(resource_id=uuid7()))

        mock_publisher.publish.assert_not_awaited()

    @pytest.mark.parametrize(
        ("country_code", "resource_type", "finder"),
        [
            ("EE", ResourceType.METERING_POINT, "find_by_country_code_and_type"),
            ("EE", None, "find_by_country_code"),
            (None, ResourceType.CONNECTION_POINT, "find_by_type"),
            (None, None, "find_all"),
        ],
    )
    async def test_list_dispatches_on_filters(
        self, service, mock_repo, country_code, resource_type, finder
    ):
        page_request = PageRequest(page=0, size=10)
        resources = [create_resource(version=0), create_resource(version=0)]
        getattr(mock_repo, finder).return_value = Page(
            items=resources, page=0, size=10, total_items=2
        )

        result = await service.list_resources(
            ListResources(
                country_code=country_code,
                resource_type=resource_type,
                page_request=page_request,
            )
        )

        assert isinstance(result, Success)
        assert [s.id for s in result.value.items] == [r.id for r in resources]
        assert result.value.total_items == 2
        getattr(mock_repo, finder).assert_awaited_once()


# =============================================================================
# Export
# =============================================================================


@pytest.mark.unit
class TestExportAll:
    """Test ResourceService.export_all."""

    async def test_export_hands_snapshots_to_publisher(
        self, service, mock_repo, mock_publisher
    ):
        resources = [create_resource(version=0) for _ in range(250)]
        mock_repo.find_all_with_characteristics.return_value = resources
        mock_publisher.publish_batch.return_value = 3

        result = await service.export_all()

        assert isinstance(result, Success)
        assert result.value.total_resources == 250
        assert result.value.batch_count == 3
        assert result.value.batch_size == 100
        assert result.value.estimated_seconds == 2
        snapshots, batch_size = mock_publisher.publish_batch.await_args.args
        assert batch_size == 100
        assert [s.id for s in snapshots] == [r.id for r in resources]

    async def test_batch_size_override(self, service, mock_repo, mock_publisher):
        mock_repo.find_all_with_characteristics.return_value = []

        result = await service.export_all(ExportAllResources(batch_size=25))

        assert result.value.batch_size == 25
        assert mock_publisher.publish_batch.await_args.args[1] == 25

    async def test_export_failure_is_logged_not_raised(
        self, service, mock_repo, mock_publisher, mock_logger
    ):
        mock_repo.find_all_with_characteristics.return_value = [
            create_resource(version=0)
        ]
        mock_publisher.publish_batch.side_effect = RuntimeError("stream unavailable")

        result = await service.export_all()

        assert isinstance(result, Success)
        assert result.value.batch_count == 0
        assert mock_logger.error.call_args.args[0] == "resource_export_publish_failed"

    async def test_export_publishes_no_single_events(
        self, service, mock_repo, mock_publisher
    ):
        mock_repo.find_all_with_characteristics.return_value = [
            create_resource(version=0)
        ]

        await service.export_all()

        mock_publisher.publish.assert_not_awaited()
