"""Declarative base for catalog tables.

BaseModel gives every table a UUIDv7 primary key and created_at;
BaseMutableModel adds updated_at for rows that are edited in place
(resources). Characteristic rows are replaced rather than edited, so they
only need BaseModel.

Column types are the portable generics (Uuid, DateTime, String) so the same
models run on PostgreSQL and on SQLite in tests. Domain entities never
inherit from these classes; the repository maps between the two.
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Root of all catalog models: id + created_at."""

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"


class BaseMutableModel(BaseModel):
    """Model whose rows change after insert; tracks updated_at."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
