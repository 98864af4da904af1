"""create_resource_tables

Revision ID: a1c4e7d2b9f0
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "a1c4e7d2b9f0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create resources and characteristics tables."""
    op.create_table(
        "resources",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "type",
            sa.String(length=32),
            nullable=False,
            comment="Resource type (METERING_POINT, CONNECTION_POINT)",
        ),
        sa.Column(
            "country_code",
            sa.String(length=2),
            nullable=False,
            comment="ISO 3166-1 alpha-2 country code",
        ),
        # Embedded location
        sa.Column("street_address", sa.String(length=255), nullable=False),
        sa.Column("city", sa.String(length=100), nullable=False),
        sa.Column("postal_code", sa.String(length=20), nullable=False),
        sa.Column("location_country_code", sa.String(length=2), nullable=False),
        sa.Column(
            "version",
            sa.Integer(),
            nullable=False,
            comment="Optimistic locking version",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_resources_type"), "resources", ["type"], unique=False)
    op.create_index(
        op.f("ix_resources_country_code"),
        "resources",
        ["country_code"],
        unique=False,
    )
    op.create_index(
        "ix_resources_country_code_type",
        "resources",
        ["country_code", "type"],
        unique=False,
    )

    op.create_table(
        "characteristics",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("resource_id", sa.Uuid(), nullable=False),
        sa.Column("code", sa.String(length=5), nullable=False),
        sa.Column("type", sa.String(length=32), nullable=False),
        sa.Column("value", sa.String(length=255), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["resource_id"], ["resources.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "resource_id",
            "code",
            "type",
            name="uq_characteristics_resource_code_type",
        ),
    )
    op.create_index(
        op.f("ix_characteristics_resource_id"),
        "characteristics",
        ["resource_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop characteristics and resources tables."""
    op.drop_index(op.f("ix_characteristics_resource_id"), table_name="characteristics")
    op.drop_table("characteristics")

    op.drop_index("ix_resources_country_code_type", table_name="resources")
    op.drop_index(op.f("ix_resources_country_code"), table_name="resources")
    op.drop_index(op.f("ix_resources_type"), table_name="resources")
    op.drop_table("resources")
