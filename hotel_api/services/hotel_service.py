"""
Hotel API - Hotel Service
===========================

What:  The layer route handlers talk to. Each operation forwards to exactly
       one repository operation.
How:   Holds a HotelRepository (the abstract contract), injected per request.
Who:   Called by hotel_api.routes.hotels; calls the repository.

There are no business rules here yet. Rules that span several repository
calls belong in this class rather than in the repository or the routes.
"""

from typing import List, Optional

from hotel_api.models.hotel import Hotel
from hotel_api.repositories.base import HotelRepository
from hotel_api.schemas.hotel import HotelCreate, HotelUpdate


class HotelService:
    """Hotel operations exposed to the HTTP layer."""

    def __init__(self, repository: HotelRepository):
        self.repository = repository

    async def create_hotel(self, data: HotelCreate) -> Hotel:
        return await self.repository.create_hotel(data)

    async def get_all_hotels(self) -> List[Hotel]:
        return await self.repository.get_all_hotels()

    async def get_hotel_by_id(self, hotel_id: int) -> Optional[Hotel]:
        """None when absent; the caller decides how to report it."""
        return await self.repository.find_hotel_by_id(hotel_id)

    async def delete_hotel_by_id(self, hotel_id: int) -> None:
        await self.repository.delete_hotel_by_id(hotel_id)

    async def soft_delete_hotel_by_id(self, hotel_id: int) -> Hotel:
        return await self.repository.soft_delete_hotel_by_id(hotel_id)

    async def get_deleted_hotels(self) -> List[Hotel]:
        return await self.repository.get_deleted_hotels()

    async def update_hotel_by_id(self, hotel_id: int, data: HotelUpdate) -> Hotel:
        return await self.repository.update_hotel_by_id(hotel_id, data)
