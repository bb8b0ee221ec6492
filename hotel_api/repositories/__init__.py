"""Persistence layer: the HotelRepository contract and its SQLAlchemy implementation."""

from hotel_api.repositories.base import HotelRepository
from hotel_api.repositories.hotel_repository import SQLAlchemyHotelRepository

__all__ = ["HotelRepository", "SQLAlchemyHotelRepository"]
