"""
Hotel API - SQLAlchemy Hotel Repository
=========================================

What:  HotelRepository implementation over an AsyncSession.
How:   Each method issues its statements and flushes; the transaction is
       committed (or rolled back) by get_db_session() when the request ends.
Who:   Built per request by hotel_api.dependencies and handed to HotelService.

Error translation:
    SQLAlchemyError from any statement is logged with its type and re-raised
    as BadRequestError carrying an operation-specific message. The session
    dependency then rolls the transaction back.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.exceptions import BadRequestError
from hotel_api.models.hotel import Hotel
from hotel_api.repositories.base import HotelRepository
from hotel_api.schemas.hotel import HotelCreate, HotelUpdate

logger = logging.getLogger(__name__)

HOTEL_NOT_FOUND = "Hotel not found"


class SQLAlchemyHotelRepository(HotelRepository):
    """Repository for Hotel database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_hotel(self, data: HotelCreate) -> Hotel:
        hotel = Hotel(
            name=data.name,
            location=data.location,
            ratings=data.ratings,
        )
        try:
            self.db.add(hotel)
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error(
                "Error while creating hotel",
                extra={"data": {"error_type": type(e).__name__}},
            )
            raise BadRequestError("Error while creating hotel")

        logger.info("Hotel created", extra={"data": {"hotel_id": hotel.id}})
        return hotel

    async def get_all_hotels(self) -> List[Hotel]:
        try:
            result = await self.db.execute(
                select(Hotel).where(Hotel.deleted_at.is_(None)).order_by(Hotel.id)
            )
        except SQLAlchemyError as e:
            logger.error(
                "Error while fetching hotels",
                extra={"data": {"error_type": type(e).__name__}},
            )
            raise BadRequestError("Error while fetching hotels")
        return list(result.scalars().all())

    async def find_hotel_by_id(self, hotel_id: int) -> Optional[Hotel]:
        try:
            result = await self.db.execute(select(Hotel).where(Hotel.id == hotel_id))
        except SQLAlchemyError as e:
            logger.error(
                "Error while fetching hotel",
                extra={"data": {"hotel_id": hotel_id, "error_type": type(e).__name__}},
            )
            raise BadRequestError("Error while fetching hotel")
        return result.scalar_one_or_none()

    async def get_hotel_by_id(self, hotel_id: int) -> Hotel:
        hotel = await self.find_hotel_by_id(hotel_id)
        if hotel is None:
            logger.warning(HOTEL_NOT_FOUND, extra={"data": {"hotel_id": hotel_id}})
            raise BadRequestError(HOTEL_NOT_FOUND)
        return hotel

    async def delete_hotel_by_id(self, hotel_id: int) -> None:
        try:
            result = await self.db.execute(delete(Hotel).where(Hotel.id == hotel_id))
        except SQLAlchemyError as e:
            logger.error(
                "Error while deleting hotel",
                extra={"data": {"hotel_id": hotel_id, "error_type": type(e).__name__}},
            )
            raise BadRequestError("Error while deleting hotel")
        logger.info(
            "Hotel hard-deleted",
            extra={"data": {"hotel_id": hotel_id, "rows": result.rowcount}},
        )

    async def soft_delete_hotel_by_id(self, hotel_id: int) -> Hotel:
        hotel = await self.get_hotel_by_id(hotel_id)

        try:
            hotel.mark_deleted()
        except ValueError:
            raise BadRequestError("Hotel is already deleted")

        # Only deleted_at changes; name/location/ratings are written as they are
        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error(
                "Error while soft deleting hotel",
                extra={"data": {"hotel_id": hotel_id, "error_type": type(e).__name__}},
            )
            raise BadRequestError("Error while soft deleting hotel")

        logger.info(
            "Hotel soft-deleted",
            extra={"data": {"hotel_id": hotel_id, "deleted_at": hotel.deleted_at.isoformat()}},
        )
        return hotel

    async def get_deleted_hotels(self) -> List[Hotel]:
        try:
            result = await self.db.execute(
                select(Hotel).where(Hotel.deleted_at.is_not(None)).order_by(Hotel.id)
            )
        except SQLAlchemyError as e:
            logger.error(
                "Error while fetching deleted hotels",
                extra={"data": {"error_type": type(e).__name__}},
            )
            raise BadRequestError("Error while fetching deleted hotels")
        return list(result.scalars().all())

    async def update_hotel_by_id(self, hotel_id: int, data: HotelUpdate) -> Hotel:
        hotel = await self.get_hotel_by_id(hotel_id)

        changes = data.changes()
        for field, value in changes.items():
            setattr(hotel, field, value)

        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error(
                "Error while updating hotel",
                extra={"data": {"hotel_id": hotel_id, "error_type": type(e).__name__}},
            )
            raise BadRequestError("Error while updating hotel")

        logger.info(
            "Hotel updated",
            extra={"data": {"hotel_id": hotel_id, "fields": sorted(changes)}},
        )
        return hotel
