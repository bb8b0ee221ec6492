"""Add soft delete to Hotels

Revision ID: 003
Revises: 002
Create Date: 2026-03-01 07:57:02.000000+00:00

What:  Adds the nullable `deletedAt` timestamp. NULL marks an active hotel;
       every existing row starts active.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        "Hotels",
        sa.Column("deletedAt", sa.DateTime(timezone=True), nullable=True, server_default=None),
    )


def downgrade() -> None:
    op.drop_column("Hotels", "deletedAt")
