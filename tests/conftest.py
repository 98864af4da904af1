"""Pytest configuration and shared test helpers.

This configuration ensures:
1. Required settings exist before any src module is imported
2. Coroutine tests are marked for pytest-asyncio automatically
3. Integration tests get an isolated in-memory SQLite database
4. Domain objects can be built with one call and sensible defaults
"""

import inspect
import os

# Settings are loaded at import time; DATABASE_URL has no default.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("EVENT_PUBLISHER_TYPE", "in-memory")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

from datetime import UTC, datetime  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.application.commands import CharacteristicSpec  # noqa: E402
from src.domain.entities import Characteristic, Resource  # noqa: E402
from src.domain.enums import CharacteristicType, ResourceType  # noqa: E402
from src.domain.value_objects import Location, ResourceSnapshot  # noqa: E402
from src.infrastructure.persistence.database import Database  # noqa: E402

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


def pytest_collection_modifyitems(config, items):
    """Mark every coroutine test function with pytest.mark.asyncio."""
    for item in items:
        function = getattr(item, "function", None)
        if function is not None and inspect.iscoroutinefunction(function):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Test helper functions for domain objects
# =============================================================================


def create_location(
    street_address: str = "Viru 1",
    city: str = "Tallinn",
    postal_code: str = "10111",
    country_code: str = "EE",
) -> Location:
    """Build a Location (valid Estonian address by default)."""
    return Location(
        street_address=street_address,
        city=city,
        postal_code=postal_code,
        country_code=country_code,
    )


def create_spec(
    code: str = "CONS1",
    characteristic_type: CharacteristicType = CharacteristicType.CONSUMPTION_TYPE,
    value: str = "RESIDENTIAL",
) -> CharacteristicSpec:
    """Build a requested characteristic for commands."""
    return CharacteristicSpec(code=code, type=characteristic_type, value=value)


def create_resource(
    resource_type: ResourceType = ResourceType.METERING_POINT,
    country_code: str = "EE",
    location: Location | None = None,
    characteristics: list[tuple[str, CharacteristicType, str]] | None = None,
    version: int | None = None,
) -> Resource:
    """Build a Resource aggregate.

    Args:
        resource_type: Resource classification.
        country_code: Owning country.
        location: Location (default: create_location(country_code=...)).
        characteristics: (code, type, value) tuples to attach in order.
        version: Persisted version. None means "never saved".

    Usage:
        resource = create_resource(
            characteristics=[("CP001", CharacteristicType.CHARGING_POINT, "22kW")],
            version=3,
        )
    """
    resource = Resource.create(
        resource_type=resource_type,
        country_code=country_code,
        location=location or create_location(country_code=country_code),
    )
    for code, characteristic_type, value in characteristics or []:
        resource.add_characteristic(
            Characteristic.create(
                code=code, characteristic_type=characteristic_type, value=value
            )
        )
    if version is not None:
        now = datetime.now(UTC)
        resource.version = version
        resource.created_at = now
        resource.updated_at = now
    return resource


def create_snapshot(**kwargs) -> ResourceSnapshot:
    """Build a ResourceSnapshot of a persisted resource (version 0 default)."""
    kwargs.setdefault("version", 0)
    return ResourceSnapshot.from_entity(create_resource(**kwargs))


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Logger double implementing LoggerProtocol by duck typing."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest_asyncio.fixture
async def database():
    """Fresh in-memory SQLite database with all tables created.

    Each test gets its own engine, so no rows leak between tests.
    """
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()
