"""create user_equipment table

Revision ID: d51c0e7b9f44
Revises: a9f2b6c4e301
Create Date: 2024-08-11 03:37:17.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "d51c0e7b9f44"
down_revision: str | None = "a9f2b6c4e301"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "user_equipment",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column(
            "equipment_id",
            sa.Integer(),
            sa.ForeignKey("equipment.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("equipment_reg_number", sa.String(length=255), nullable=False),
        sa.Column("equipment_reg_year", sa.String(length=255), nullable=False),
        sa.Column("equipment_reg_location", sa.String(length=255), nullable=False),
        sa.Column("state", sa.String(length=255), nullable=False),
        sa.Column("district", sa.String(length=255), nullable=False),
        sa.Column("equipment_details", sa.Text(), nullable=False),
        sa.Column("equipment_image", sa.Text(), nullable=False),
    )
    # Owner listing filters on user_id
    op.create_index("ix_user_equipment_user_id", "user_equipment", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_user_equipment_user_id", table_name="user_equipment")
    op.drop_table("user_equipment")
