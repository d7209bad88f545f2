"""Create the PostGIS-backed stores catalog.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS postgis")

    op.create_table(
        "stores",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("street", sa.String(200), nullable=False),
        sa.Column("street2", sa.String(200), nullable=True),
        sa.Column("street3", sa.String(200), nullable=True),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("postal_code", sa.String(20), nullable=False),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("today_open", sa.String(20), nullable=False),
        sa.Column("today_close", sa.String(20), nullable=False),
        sa.Column("location_type", sa.String(50), nullable=False),
        sa.Column(
            "collection_point", sa.Boolean, nullable=False, server_default="false"
        ),
        sa.Column(
            "created_at", sa.DateTime, nullable=False, server_default=sa.func.now()
        ),
    )
    # Generated from latitude/longitude so rows are written with plain floats
    op.execute(
        "ALTER TABLE stores ADD COLUMN location geography(Point, 4326) "
        "GENERATED ALWAYS AS "
        "(geography(ST_SetSRID(ST_MakePoint(longitude, latitude), 4326))) STORED"
    )
    op.create_index(
        "idx_stores_location", "stores", ["location"], postgresql_using="gist"
    )


def downgrade() -> None:
    op.drop_index("idx_stores_location", table_name="stores")
    op.drop_table("stores")
