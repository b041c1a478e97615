"""create roles table

Revision ID: e8a4f0d2c615
Revises: d51c0e7b9f44
Create Date: 2024-08-11 03:37:20.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "e8a4f0d2c615"
down_revision: str | None = "d51c0e7b9f44"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    roles = op.create_table(
        "roles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("role", sa.String(length=255), nullable=False),
        sa.UniqueConstraint("role", name="uq_roles_role"),
    )
    # Names must match app.core.permissions.ROLE_PERMISSIONS
    op.bulk_insert(roles, [{"role": "admin"}, {"role": "user"}])


def downgrade() -> None:
    op.drop_table("roles")
