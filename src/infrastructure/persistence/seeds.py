"""Sample resource seeder.

Inserts two sample resources (an Estonian metering point and a Finnish
connection point) when the catalog is empty. Idempotent via count check -
safe to run on every startup. No events are published for seeded rows.
"""

from src.core.result import Failure
from src.domain.entities import Characteristic, Resource
from src.domain.enums import CharacteristicType, ResourceType
from src.domain.protocols import LoggerProtocol, ResourceRepository
from src.domain.value_objects import Location

SAMPLE_RESOURCES = [
    {
        "resource_type": ResourceType.METERING_POINT,
        "country_code": "EE",
        "location": Location(
            street_address="Narva mnt 7",
            city="Tallinn",
            postal_code="10117",
            country_code="EE",
        ),
        "characteristics": [
            ("C1", CharacteristicType.CONSUMPTION_TYPE, "Residential"),
            ("CP1", CharacteristicType.CHARGING_POINT, "22kW"),
        ],
    },
    {
        "resource_type": ResourceType.CONNECTION_POINT,
        "country_code": "FI",
        "location": Location(
            street_address="Mannerheimintie 1",
            city="Helsinki",
            postal_code="00100",
            country_code="FI",
        ),
        "characteristics": [
            ("S1", CharacteristicType.CONNECTION_POINT_STATUS, "Active"),
        ],
    },
]


async def seed_sample_resources(
    resource_repo: ResourceRepository, logger: LoggerProtocol
) -> int:
    """Insert sample resources if no resources exist yet.

    Args:
        resource_repo: Repository to insert through.
        logger: Structured logger.

    Returns:
        Number of resources inserted (0 when the catalog was not empty).
    """
    existing = await resource_repo.count()
    if existing > 0:
        logger.info("resource_seeding_skipped", existing_count=existing)
        return 0

    inserted = 0
    for sample in SAMPLE_RESOURCES:
        resource = Resource.create(
            resource_type=sample["resource_type"],
            country_code=sample["country_code"],
            location=sample["location"],
        )
        for code, characteristic_type, value in sample["characteristics"]:
            resource.add_characteristic(
                Characteristic.create(
                    code=code, characteristic_type=characteristic_type, value=value
                )
            )

        result = await resource_repo.save(resource)
        if isinstance(result, Failure):
            logger.warning(
                "resource_seed_failed",
                country_code=resource.country_code,
                **result.error.log_fields(),
            )
            continue
        inserted += 1

    logger.info("resource_seeding_completed", inserted_count=inserted)
    return inserted
