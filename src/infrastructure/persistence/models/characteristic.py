"""Characteristic database model.

Rows are owned by a resource and deleted with it. (resource_id, code, type)
is unique, which is the storage-level backstop for duplicate characteristics.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel

UNIQUE_CODE_TYPE_CONSTRAINT = "uq_characteristics_resource_code_type"


class Characteristic(BaseModel):
    """Characteristic model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when created (from BaseModel)
        resource_id: FK to resources (CASCADE delete)
        code: Characteristic code (max 5 chars)
        type: Characteristic type enum value
        value: Characteristic value (max 255 chars)
        position: Order within the owning resource
    """

    __tablename__ = "characteristics"

    resource_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("resources.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    code: Mapped[str] = mapped_column(String(5), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    value: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint(
            "resource_id",
            "code",
            "type",
            name=UNIQUE_CODE_TYPE_CONSTRAINT,
        ),
    )
