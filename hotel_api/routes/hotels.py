"""
Hotel API - Hotel Route Handlers
==================================

What:  /api/v1/hotel/* endpoints.
How:   Each handler reads its path/body parameters, calls exactly one
       HotelService operation, and wraps the result in the
       `{message, success, <payload>}` envelope.
Who:   Called by admin clients.

Handlers never catch service errors. BadRequestError / NotFoundError /
unexpected exceptions propagate to the exception handlers in main.py, and
body validation failures are answered before the handler is entered.

Route order matters: the literal paths (/create, /all-hotels,
/deleted-hotels, /soft-delete/{id}) are declared before /{hotel_id}.
"""

import logging

from fastapi import APIRouter, status

from hotel_api.dependencies import HotelServiceDep
from hotel_api.exceptions import NotFoundError
from hotel_api.schemas.hotel import (
    ErrorResponse,
    HotelCreate,
    HotelEnvelope,
    HotelListEnvelope,
    HotelResponse,
    HotelUpdate,
    MessageResponse,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/hotel", tags=["Hotels"])


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    response_model=HotelEnvelope,
    responses={
        400: {"description": "Invalid hotel fields", "model": ValidationErrorResponse},
    },
    summary="Create a hotel",
)
async def create_hotel(payload: HotelCreate, service: HotelServiceDep) -> HotelEnvelope:
    hotel = await service.create_hotel(payload)
    return HotelEnvelope(
        message="Hotel created successfully",
        hotel=HotelResponse.model_validate(hotel),
    )


@router.get(
    "/all-hotels",
    response_model=HotelListEnvelope,
    summary="List active hotels",
)
async def get_all_hotels(service: HotelServiceDep) -> HotelListEnvelope:
    hotels = await service.get_all_hotels()
    return HotelListEnvelope(
        message="Hotels retrieved successfully",
        hotels=[HotelResponse.model_validate(h) for h in hotels],
    )


@router.get(
    "/deleted-hotels",
    response_model=HotelListEnvelope,
    summary="List soft-deleted hotels",
)
async def get_deleted_hotels(service: HotelServiceDep) -> HotelListEnvelope:
    hotels = await service.get_deleted_hotels()
    return HotelListEnvelope(
        message="Deleted hotels retrieved successfully",
        hotels=[HotelResponse.model_validate(h) for h in hotels],
    )


@router.delete(
    "/soft-delete/{hotel_id}",
    response_model=HotelEnvelope,
    responses={
        400: {"description": "Hotel absent or already deleted", "model": ErrorResponse},
    },
    summary="Soft-delete a hotel",
    description="Marks the hotel deleted by setting deletedAt. The row stays in the table.",
)
async def soft_delete_hotel(hotel_id: int, service: HotelServiceDep) -> HotelEnvelope:
    hotel = await service.soft_delete_hotel_by_id(hotel_id)
    return HotelEnvelope(
        message="Hotel soft deleted successfully",
        hotel=HotelResponse.model_validate(hotel),
    )


@router.get(
    "/{hotel_id}",
    response_model=HotelEnvelope,
    responses={
        404: {"description": "Hotel not found", "model": ErrorResponse},
    },
    summary="Get a hotel by ID",
    description="Returns the hotel whether or not it has been soft-deleted.",
)
async def get_hotel(hotel_id: int, service: HotelServiceDep) -> HotelEnvelope:
    hotel = await service.get_hotel_by_id(hotel_id)
    if hotel is None:
        raise NotFoundError(resource="Hotel", resource_id=hotel_id)
    return HotelEnvelope(
        message="Hotel retrieved successfully",
        hotel=HotelResponse.model_validate(hotel),
    )


@router.put(
    "/{hotel_id}",
    response_model=HotelEnvelope,
    responses={
        400: {"description": "Hotel not found or invalid fields", "model": ErrorResponse},
    },
    summary="Update a hotel",
    description="Applies only the fields present in the body (name, location, ratings).",
)
async def update_hotel(
    hotel_id: int, payload: HotelUpdate, service: HotelServiceDep
) -> HotelEnvelope:
    hotel = await service.update_hotel_by_id(hotel_id, payload)
    return HotelEnvelope(
        message="Hotel updated successfully",
        hotel=HotelResponse.model_validate(hotel),
    )


@router.delete(
    "/{hotel_id}",
    response_model=MessageResponse,
    summary="Hard-delete a hotel",
    description="Removes the row. Deleting an id that does not exist still succeeds.",
)
async def delete_hotel(hotel_id: int, service: HotelServiceDep) -> MessageResponse:
    await service.delete_hotel_by_id(hotel_id)
    return MessageResponse(message="Hotel deleted successfully")
