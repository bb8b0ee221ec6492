"""Add ratings to Hotels

Revision ID: 002
Revises: 001
Create Date: 2026-02-28 08:32:12.000000+00:00

What:  Adds the nullable DECIMAL(3,2) `ratings` column. Existing rows get NULL.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        "Hotels",
        sa.Column("ratings", sa.Numeric(3, 2), nullable=True),
    )


def downgrade() -> None:
    op.drop_column("Hotels", "ratings")
