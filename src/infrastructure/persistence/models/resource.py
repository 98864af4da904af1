"""Resource database model.

This module defines the Resource model for storing catalog resources.

Architecture:
    - Location embedded as columns (replaced wholesale on update)
    - Resource type stored as its uppercase enum value
    - version column is the optimistic locking token (compare-and-swap)
    - Characteristics live in their own table (see characteristic.py)
"""

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel
from src.infrastructure.persistence.models.characteristic import Characteristic


class Resource(BaseMutableModel):
    """Resource model for catalog storage.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        type: METERING_POINT or CONNECTION_POINT
        country_code: ISO 3166-1 alpha-2 owning country
        street_address, city, postal_code, location_country_code: Location
        version: Optimistic locking token (0 on insert)

    Indexes:
        - ix_resources_country_code: Country filter
        - ix_resources_type: Type filter
        - ix_resources_country_code_type: Combined filter
    """

    __tablename__ = "resources"

    type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        index=True,
        comment="Resource type (METERING_POINT, CONNECTION_POINT)",
    )
    country_code: Mapped[str] = mapped_column(
        String(2),
        nullable=False,
        index=True,
        comment="ISO 3166-1 alpha-2 country code",
    )

    # Embedded location
    street_address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    location_country_code: Mapped[str] = mapped_column(String(2), nullable=False)

    version: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Optimistic locking version",
    )

    characteristics: Mapped[list[Characteristic]] = relationship(
        Characteristic,
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by=Characteristic.position,
    )

    __table_args__ = (
        Index("ix_resources_country_code_type", "country_code", "type"),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<Resource("
            f"id={self.id}, "
            f"type={self.type!r}, "
            f"country_code={self.country_code!r}, "
            f"version={self.version}"
            f")>"
        )
