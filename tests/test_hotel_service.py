"""
Tests for HotelService.

The service is a pass-through: every call should reach exactly one
repository method with the same arguments and hand back its result.
"""

import pytest

from hotel_api.exceptions import BadRequestError
from hotel_api.schemas.hotel import HotelCreate, HotelUpdate
from hotel_api.services.hotel_service import HotelService


@pytest.fixture
def service(mock_repository):
    return HotelService(mock_repository)


class TestHotelService:
    @pytest.mark.asyncio
    async def test_create_delegates(self, service, mock_repository):
        payload = HotelCreate(name="Grand Plaza", location="Lisbon")
        mock_repository.create_hotel.return_value = "created"

        result = await service.create_hotel(payload)

        assert result == "created"
        mock_repository.create_hotel.assert_awaited_once_with(payload)

    @pytest.mark.asyncio
    async def test_get_all_delegates(self, service, mock_repository):
        mock_repository.get_all_hotels.return_value = []

        assert await service.get_all_hotels() == []
        mock_repository.get_all_hotels.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_get_by_id_uses_nullable_lookup(self, service, mock_repository):
        mock_repository.find_hotel_by_id.return_value = None

        assert await service.get_hotel_by_id(3) is None
        mock_repository.find_hotel_by_id.assert_awaited_once_with(3)
        mock_repository.get_hotel_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_delegates(self, service, mock_repository):
        await service.delete_hotel_by_id(5)
        mock_repository.delete_hotel_by_id.assert_awaited_once_with(5)

    @pytest.mark.asyncio
    async def test_soft_delete_delegates(self, service, mock_repository):
        mock_repository.soft_delete_hotel_by_id.return_value = "deleted"

        assert await service.soft_delete_hotel_by_id(5) == "deleted"
        mock_repository.soft_delete_hotel_by_id.assert_awaited_once_with(5)

    @pytest.mark.asyncio
    async def test_get_deleted_delegates(self, service, mock_repository):
        mock_repository.get_deleted_hotels.return_value = ["a"]

        assert await service.get_deleted_hotels() == ["a"]
        mock_repository.get_deleted_hotels.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_update_delegates(self, service, mock_repository):
        payload = HotelUpdate(ratings=4.5)
        mock_repository.update_hotel_by_id.return_value = "updated"

        assert await service.update_hotel_by_id(9, payload) == "updated"
        mock_repository.update_hotel_by_id.assert_awaited_once_with(9, payload)

    @pytest.mark.asyncio
    async def test_repository_errors_propagate(self, service, mock_repository):
        mock_repository.soft_delete_hotel_by_id.side_effect = BadRequestError(
            "Hotel not found"
        )

        with pytest.raises(BadRequestError, match="Hotel not found"):
            await service.soft_delete_hotel_by_id(1)
