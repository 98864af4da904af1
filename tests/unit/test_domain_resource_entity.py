"""Unit tests for the Resource aggregate and Characteristic entity.

Tests cover:
- Resource creation (fresh id, no version, empty characteristics)
- Characteristic add/remove/clear/replace keeps the back-reference in sync
- Location replacement
- Snapshot capture and serialization

Architecture:
- Pure domain tests (no mocks, no I/O)
"""

from datetime import UTC, datetime
from uuid import UUID

import pytest

from src.domain.entities import Characteristic, Resource
from src.domain.enums import CharacteristicType, ResourceType
from src.domain.value_objects import ResourceSnapshot
from tests.conftest import create_location, create_resource


def _characteristic(code: str = "CONS1", value: str = "RESIDENTIAL") -> Characteristic:
    return Characteristic.create(
        code=code,
        characteristic_type=CharacteristicType.CONSUMPTION_TYPE,
        value=value,
    )


# =============================================================================
# Creation
# =============================================================================


@pytest.mark.unit
class TestResourceCreation:
    """Test Resource.create factory."""

    def test_create_assigns_id_and_leaves_version_unset(self):
        """Test new resources get an id and are not yet versioned."""
        resource = Resource.create(
            resource_type=ResourceType.METERING_POINT,
            country_code="EE",
            location=create_location(),
        )

        assert isinstance(resource.id, UUID)
        assert resource.version is None
        assert resource.is_new is True
        assert resource.characteristics == []
        assert resource.created_at is None

    def test_create_generates_distinct_ids(self):
        """Test two resources never share an id."""
        a = create_resource()
        b = create_resource()

        assert a.id != b.id

    def test_versioned_resource_is_not_new(self):
        """Test a resource with version 0 counts as persisted."""
        resource = create_resource(version=0)

        assert resource.is_new is False


# =============================================================================
# Characteristic Management
# =============================================================================


@pytest.mark.unit
class TestCharacteristicManagement:
    """Test characteristic add/remove on the aggregate."""

    def test_add_characteristic_sets_back_reference(self):
        """Test adding sets resource_id and preserves insertion order."""
        resource = create_resource()
        first = _characteristic("A1")
        second = _characteristic("B2")

        resource.add_characteristic(first)
        resource.add_characteristic(second)

        assert resource.characteristics == [first, second]
        assert first.resource_id == resource.id
        assert second.resource_id == resource.id

    def test_remove_characteristic_clears_back_reference(self):
        """Test removing detaches the characteristic."""
        resource = create_resource()
        characteristic = _characteristic()
        resource.add_characteristic(characteristic)

        resource.remove_characteristic(characteristic)

        assert resource.characteristics == []
        assert characteristic.resource_id is None

    def test_remove_unknown_characteristic_raises(self):
        """Test removing a characteristic that is not attached fails."""
        resource = create_resource()

        with pytest.raises(ValueError):
            resource.remove_characteristic(_characteristic())

    def test_clear_characteristics_detaches_all(self):
        """Test clear empties the set and detaches every child."""
        resource = create_resource()
        children = [_characteristic("A1"), _characteristic("B2")]
        for child in children:
            resource.add_characteristic(child)

        resource.clear_characteristics()

        assert resource.characteristics == []
        assert all(child.resource_id is None for child in children)

    def test_replace_characteristics_swaps_whole_set(self):
        """Test replace detaches old children and attaches new ones in order."""
        resource = create_resource(
            characteristics=[("OLD1", CharacteristicType.CHARGING_POINT, "11kW")]
        )
        old = resource.characteristics[0]
        new = [_characteristic("N1"), _characteristic("N2")]

        resource.replace_characteristics(new)

        assert resource.characteristics == new
        assert old.resource_id is None
        assert all(c.resource_id == resource.id for c in new)

    def test_duplicates_are_not_rejected_by_the_aggregate(self):
        """Test uniqueness is left to the validator and storage."""
        resource = create_resource()

        resource.add_characteristic(_characteristic("A1"))
        resource.add_characteristic(_characteristic("A1"))

        assert len(resource.characteristics) == 2

    def test_characteristic_key_combines_code_and_type(self):
        """Test the uniqueness key format."""
        characteristic = Characteristic.create(
            code="CP001",
            characteristic_type=CharacteristicType.CHARGING_POINT,
            value="22kW",
        )

        assert characteristic.key == "CP001_CHARGING_POINT"


# =============================================================================
# Location
# =============================================================================


@pytest.mark.unit
class TestLocationChange:
    """Test location replacement."""

    def test_change_location_replaces_wholesale(self):
        """Test the new location replaces every field."""
        resource = create_resource()
        new_location = create_location(
            street_address="Pärnu mnt 10", city="Tartu", postal_code="51003"
        )

        resource.change_location(new_location)

        assert resource.location == new_location

    def test_change_location_keeps_type_and_country(self):
        """Test immutable attributes are untouched by location changes."""
        resource = create_resource(
            resource_type=ResourceType.CONNECTION_POINT, country_code="FI"
        )

        resource.change_location(create_location(country_code="SE"))

        assert resource.type == ResourceType.CONNECTION_POINT
        assert resource.country_code == "FI"


# =============================================================================
# Snapshots
# =============================================================================


@pytest.mark.unit
class TestResourceSnapshot:
    """Test snapshot capture and serialization."""

    def test_snapshot_is_detached_from_later_mutation(self):
        """Test mutating the aggregate does not change an earlier snapshot."""
        resource = create_resource(
            characteristics=[("A1", CharacteristicType.CONSUMPTION_TYPE, "x")],
            version=2,
        )
        snapshot = ResourceSnapshot.from_entity(resource)

        resource.clear_characteristics()
        resource.change_location(create_location(city="Narva"))

        assert len(snapshot.characteristics) == 1
        assert snapshot.location.city == "Tallinn"
        assert snapshot.version == 2

    def test_to_dict_uses_camel_case_wire_shape(self):
        """Test serialized snapshot keys and values."""
        created = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
        resource = create_resource(
            characteristics=[("CP001", CharacteristicType.CHARGING_POINT, "22kW")],
            version=0,
        )
        resource.created_at = created
        resource.updated_at = created

        data = ResourceSnapshot.from_entity(resource).to_dict()

        assert data["id"] == str(resource.id)
        assert data["type"] == "METERING_POINT"
        assert data["countryCode"] == "EE"
        assert data["location"] == {
            "streetAddress": "Viru 1",
            "city": "Tallinn",
            "postalCode": "10111",
            "countryCode": "EE",
        }
        assert data["characteristics"][0]["code"] == "CP001"
        assert data["characteristics"][0]["type"] == "CHARGING_POINT"
        assert data["createdAt"] == created.isoformat()
        assert data["version"] == 0

    def test_to_dict_of_unsaved_resource_has_null_timestamps(self):
        """Test missing timestamps serialize as None."""
        data = ResourceSnapshot.from_entity(create_resource()).to_dict()

        assert data["createdAt"] is None
        assert data["updatedAt"] is None
        assert data["version"] is None
