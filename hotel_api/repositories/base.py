"""
Hotel API - Abstract Hotel Repository
=======================================

What:  Abstract base class defining the persistence contract for hotels.
How:   SQLAlchemyHotelRepository implements it against the `Hotels` table;
       tests substitute mocks or fakes. HotelService depends only on this
       interface.
Who:   Called by HotelService; constructed per request in dependencies.py.

Contract:
    - Every method is a coroutine; each awaits at most the database.
    - Failures are raised as BadRequestError (never swallowed, never retried).
    - Soft-deleted rows are excluded from get_all_hotels() but still
      reachable by id.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from hotel_api.models.hotel import Hotel
from hotel_api.schemas.hotel import HotelCreate, HotelUpdate


class HotelRepository(ABC):
    """Persistence operations over the single Hotel table."""

    @abstractmethod
    async def create_hotel(self, data: HotelCreate) -> Hotel:
        """
        Insert a new row; ratings default to NULL when absent.

        Raises:
            BadRequestError: the insert failed.
        """
        ...

    @abstractmethod
    async def get_all_hotels(self) -> List[Hotel]:
        """Active rows only (deleted_at IS NULL)."""
        ...

    @abstractmethod
    async def get_hotel_by_id(self, hotel_id: int) -> Hotel:
        """
        Raises:
            BadRequestError: "Hotel not found" when no row has this id.
        """
        ...

    @abstractmethod
    async def find_hotel_by_id(self, hotel_id: int) -> Optional[Hotel]:
        """The row, or None when absent."""
        ...

    @abstractmethod
    async def delete_hotel_by_id(self, hotel_id: int) -> None:
        """Hard delete. Deleting an absent id is a no-op."""
        ...

    @abstractmethod
    async def soft_delete_hotel_by_id(self, hotel_id: int) -> Hotel:
        """
        Set deleted_at to now without re-validating the other fields.

        Raises:
            BadRequestError: the row is absent or already soft-deleted.
        """
        ...

    @abstractmethod
    async def get_deleted_hotels(self) -> List[Hotel]:
        """Soft-deleted rows only (deleted_at IS NOT NULL)."""
        ...

    @abstractmethod
    async def update_hotel_by_id(self, hotel_id: int, data: HotelUpdate) -> Hotel:
        """
        Apply the supplied subset of name/location/ratings.

        Raises:
            BadRequestError: the row is absent or the write failed.
        """
        ...
