"""create equipment_type table

Revision ID: 7c3d5e8f1a22
Revises: 4b1e9a2c7d10
Create Date: 2024-08-11 03:37:05.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "7c3d5e8f1a22"
down_revision: str | None = "4b1e9a2c7d10"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "equipment_type",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("type", sa.String(length=255), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("equipment_type")
