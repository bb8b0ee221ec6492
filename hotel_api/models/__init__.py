"""ORM models. Importing this package registers every table with Base.metadata."""

from hotel_api.models.hotel import Hotel

__all__ = ["Hotel"]
