"""
Hotel API - Hotel SQLAlchemy Model
====================================

What:  ORM model for the `Hotels` table.
How:   Inherits from the shared DeclarativeBase; Alembic revisions under
       alembic/versions build the same table in three additive steps.
Who:   Used by SQLAlchemyHotelRepository and by the test suite's create_all().

Column naming:
    Python attributes are snake_case; the physical columns keep the
    camelCase names the table was created with (createdAt, updatedAt,
    deletedAt).

State:
    ACTIVE  (deleted_at IS NULL)
      │ mark_deleted()
      ▼
    DELETED (deleted_at IS NOT NULL), terminal; there is no restore.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from hotel_api.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Hotel(Base):
    """A hotel record. Soft-deleted rows stay in the table with deleted_at set."""

    __tablename__ = "Hotels"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    location: Mapped[str] = mapped_column(String(255), nullable=False)

    # DECIMAL(3,2): 0.00 through 5.00
    ratings: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(3, 2),
        nullable=True,
        default=None,
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    # NULL = active; set once by mark_deleted(), never cleared
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        "deletedAt",
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def mark_deleted(self, when: Optional[datetime] = None) -> None:
        """
        Active → Deleted transition.

        Raises:
            ValueError: the row is already soft-deleted; deleted_at keeps
                its original value.
        """
        if self.is_deleted:
            raise ValueError(f"Hotel {self.id} is already deleted")
        self.deleted_at = when or utcnow()

    def __repr__(self) -> str:
        return (
            f"<Hotel(id={self.id}, name='{self.name}', "
            f"deleted_at='{self.deleted_at}')>"
        )
