"""
Hotel API - Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract.
How:   FastAPI validates request bodies against the *Create/*Update models
       before the route handler runs, and serializes responses through the
       envelope models (by alias, so timestamps go out as createdAt etc.).
Who:   Used by route handlers (input + response_model) and by the service
       and repository layers as DTOs.

Input constraints:
    name       string, 3-50 chars after whitespace stripping
    location   string, 3-50 chars after whitespace stripping
    ratings    number, 0-5 inclusive, optional
"""

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models (DTOs)
# ══════════════════════════════════════════════════════════════════════════


class HotelCreate(BaseModel):
    """Body of POST /api/v1/hotel/create."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=3, max_length=50, description="Hotel name")
    location: str = Field(min_length=3, max_length=50, description="City or address")
    ratings: Optional[float] = Field(
        default=None, ge=0, le=5, description="Average rating, 0-5"
    )


class HotelUpdate(BaseModel):
    """
    Body of PUT /api/v1/hotel/{id}.

    Every field is optional; only the fields present in the body are
    applied (see `changes()`). `ratings: null` clears the rating, while
    `name: null` / `location: null` are rejected because those columns are
    required.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=3, max_length=50)
    location: Optional[str] = Field(default=None, min_length=3, max_length=50)
    ratings: Optional[float] = Field(default=None, ge=0, le=5)

    @field_validator("name", "location")
    @classmethod
    def reject_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    def changes(self) -> dict:
        """Fields the client actually sent, with their normalized values."""
        return self.model_dump(exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class HotelResponse(BaseModel):
    """Serialized Hotel row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    location: str
    ratings: Optional[float] = None
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )
    deleted_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("deleted_at", "deletedAt"),
        serialization_alias="deletedAt",
    )


class MessageResponse(BaseModel):
    """Base envelope: every JSON response carries these two keys."""

    message: str
    success: bool = True


class HotelEnvelope(MessageResponse):
    hotel: HotelResponse


class HotelListEnvelope(MessageResponse):
    hotels: List[HotelResponse]


class HealthResponse(MessageResponse):
    database: str = Field(description="Database connectivity: connected, disconnected")


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class FieldError(BaseModel):
    field: str = Field(description="Dotted path of the offending field")
    message: str


class ErrorResponse(BaseModel):
    """
    Body returned by the exception handlers.

    Example:
        {"success": false, "message": "Hotel not found"}
    """

    success: bool = False
    message: str


class ValidationErrorResponse(ErrorResponse):
    """
    Body returned when request validation fails.

    Example:
        {
            "success": false,
            "message": "Validation failed",
            "errors": [{"field": "name", "message": "String should have at least 3 characters"}]
        }
    """

    errors: List[FieldError]
