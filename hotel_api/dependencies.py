"""
Hotel API - Request-Scoped Dependencies
=========================================

What:  FastAPI dependency chain that builds the service for one request.
How:   get_db_session → SQLAlchemyHotelRepository → HotelService.
       Tests swap either link with app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.database import get_db_session
from hotel_api.repositories.base import HotelRepository
from hotel_api.repositories.hotel_repository import SQLAlchemyHotelRepository
from hotel_api.services.hotel_service import HotelService


def get_hotel_repository(
    db: AsyncSession = Depends(get_db_session),
) -> HotelRepository:
    return SQLAlchemyHotelRepository(db)


def get_hotel_service(
    repository: HotelRepository = Depends(get_hotel_repository),
) -> HotelService:
    return HotelService(repository)


HotelServiceDep = Annotated[HotelService, Depends(get_hotel_service)]
