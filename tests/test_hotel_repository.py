"""
Tests for SQLAlchemyHotelRepository against a real (SQLite) session.

Verifies:
    - Active/deleted partitioning of the list queries
    - Missing ids raise BadRequestError("Hotel not found") on the strict lookups
    - Soft delete sets deleted_at exactly once
    - Hard delete of an absent id is a no-op
    - Partial updates touch only the supplied fields
    - SQLAlchemyError is translated into BadRequestError
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from hotel_api.exceptions import BadRequestError
from hotel_api.repositories.hotel_repository import SQLAlchemyHotelRepository
from hotel_api.schemas.hotel import HotelCreate, HotelUpdate


@pytest.fixture
def repo(db_session):
    return SQLAlchemyHotelRepository(db_session)


async def _create(repo, name="Grand Plaza", location="Lisbon", ratings=None):
    return await repo.create_hotel(
        HotelCreate(name=name, location=location, ratings=ratings)
    )


class TestCreateHotel:
    @pytest.mark.asyncio
    async def test_assigns_id_and_timestamps(self, repo):
        hotel = await _create(repo, ratings=4.25)

        assert hotel.id is not None
        assert hotel.name == "Grand Plaza"
        assert hotel.created_at is not None
        assert hotel.updated_at is not None
        assert hotel.deleted_at is None

    @pytest.mark.asyncio
    async def test_ratings_defaults_to_null(self, repo):
        hotel = await _create(repo)
        assert hotel.ratings is None

    @pytest.mark.asyncio
    async def test_ids_are_distinct(self, repo):
        first = await _create(repo, name="First Inn")
        second = await _create(repo, name="Second Inn")
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_database_error_becomes_bad_request(self):
        session = AsyncMock()
        session.add = MagicMock()
        session.flush.side_effect = SQLAlchemyError("connection reset")
        repo = SQLAlchemyHotelRepository(session)

        with pytest.raises(BadRequestError, match="Error while creating hotel"):
            await repo.create_hotel(HotelCreate(name="Grand Plaza", location="Lisbon"))


class TestListQueries:
    @pytest.mark.asyncio
    async def test_active_and_deleted_partition_the_table(self, repo):
        kept = await _create(repo, name="Kept Hotel")
        gone = await _create(repo, name="Gone Hotel")
        await repo.soft_delete_hotel_by_id(gone.id)

        active = await repo.get_all_hotels()
        deleted = await repo.get_deleted_hotels()

        assert [h.id for h in active] == [kept.id]
        assert [h.id for h in deleted] == [gone.id]

    @pytest.mark.asyncio
    async def test_empty_table(self, repo):
        assert await repo.get_all_hotels() == []
        assert await repo.get_deleted_hotels() == []


class TestLookup:
    @pytest.mark.asyncio
    async def test_get_missing_hotel_raises_bad_request(self, repo):
        with pytest.raises(BadRequestError) as exc_info:
            await repo.get_hotel_by_id(999)

        assert exc_info.value.message == "Hotel not found"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_find_missing_hotel_returns_none(self, repo):
        assert await repo.find_hotel_by_id(999) is None

    @pytest.mark.asyncio
    async def test_lookup_includes_soft_deleted(self, repo):
        hotel = await _create(repo)
        await repo.soft_delete_hotel_by_id(hotel.id)

        found = await repo.get_hotel_by_id(hotel.id)
        assert found.deleted_at is not None


class TestSoftDelete:
    @pytest.mark.asyncio
    async def test_sets_deleted_at_only(self, repo):
        hotel = await _create(repo, ratings=3.5)

        deleted = await repo.soft_delete_hotel_by_id(hotel.id)

        assert deleted.deleted_at is not None
        assert deleted.name == "Grand Plaza"
        assert deleted.location == "Lisbon"

    @pytest.mark.asyncio
    async def test_second_soft_delete_is_rejected(self, repo):
        hotel = await _create(repo)
        await repo.soft_delete_hotel_by_id(hotel.id)
        first_deleted_at = hotel.deleted_at

        with pytest.raises(BadRequestError, match="already deleted"):
            await repo.soft_delete_hotel_by_id(hotel.id)

        assert hotel.deleted_at == first_deleted_at

    @pytest.mark.asyncio
    async def test_missing_hotel(self, repo):
        with pytest.raises(BadRequestError, match="Hotel not found"):
            await repo.soft_delete_hotel_by_id(42)


class TestHardDelete:
    @pytest.mark.asyncio
    async def test_removes_row(self, repo):
        hotel = await _create(repo)
        await repo.delete_hotel_by_id(hotel.id)

        assert await repo.find_hotel_by_id(hotel.id) is None
        assert await repo.get_all_hotels() == []
        assert await repo.get_deleted_hotels() == []

    @pytest.mark.asyncio
    async def test_missing_id_is_a_no_op(self, repo):
        await repo.delete_hotel_by_id(12345)


class TestUpdate:
    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(self, repo):
        hotel = await _create(repo, ratings=2.0)

        updated = await repo.update_hotel_by_id(hotel.id, HotelUpdate(ratings=4.5))

        assert updated.name == "Grand Plaza"
        assert updated.location == "Lisbon"
        assert float(updated.ratings) == 4.5

    @pytest.mark.asyncio
    async def test_explicit_null_clears_ratings(self, repo):
        hotel = await _create(repo, ratings=2.0)

        updated = await repo.update_hotel_by_id(hotel.id, HotelUpdate(ratings=None))

        assert updated.ratings is None

    @pytest.mark.asyncio
    async def test_missing_hotel(self, repo):
        with pytest.raises(BadRequestError, match="Hotel not found"):
            await repo.update_hotel_by_id(7, HotelUpdate(name="New Name"))
