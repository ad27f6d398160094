"""Create resources table

Revision ID: 001
Revises: None
Create Date: 2024-06-01 00:00:00.000000+00:00

What:  Creates the `resources` table and its secondary indexes.
How:   Mirrors resource_api/models/resource.py; status is a plain VARCHAR(20)
       holding 'Active' or 'Deleted'.

Rollback: downgrade() drops the table entirely (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "resources",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column(
            "createdAt",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updatedAt",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "status",
            sa.String(20),
            server_default=sa.text("'Active'"),
            nullable=False,
        ),
        sa.Column("value1", sa.String(), nullable=True),
        sa.Column("value2", sa.Boolean(), nullable=True),
        sa.Column("value3", sa.Integer(), nullable=True),
        sa.Column("value4", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # Status filtering on every read, time-based lookups on the timestamps
    op.create_index("resources_createdat_idx", "resources", ["createdAt"])
    op.create_index("resources_status_idx", "resources", ["status"])
    op.create_index("resources_updatedat_idx", "resources", ["updatedAt"])


def downgrade() -> None:
    """Drop the resources table. WARNING: destructive."""
    op.drop_index("resources_updatedat_idx", table_name="resources")
    op.drop_index("resources_status_idx", table_name="resources")
    op.drop_index("resources_createdat_idx", table_name="resources")
    op.drop_table("resources")
