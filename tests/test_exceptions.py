"""Tests for the AppError hierarchy."""

from hotel_api.exceptions import (
    AppError,
    BadRequestError,
    InternalServerError,
    NotFoundError,
)


class TestStatusCodes:
    def test_defaults(self):
        assert BadRequestError().status_code == 400
        assert NotFoundError().status_code == 404
        assert InternalServerError().status_code == 500
        assert AppError("boom").status_code == 500

    def test_explicit_status_code(self):
        assert AppError("teapot", status_code=418).status_code == 418


class TestNotFoundError:
    def test_message_names_resource(self):
        exc = NotFoundError(resource="Hotel", resource_id=7)

        assert exc.message == "Hotel not found"
        assert exc.context == {"resource": "Hotel", "resource_id": 7}

    def test_caller_context_is_not_modified(self):
        caller_context = {"path": "/api/v1/hotel/7"}

        exc = NotFoundError(resource="Hotel", resource_id=7, context=caller_context)

        assert caller_context == {"path": "/api/v1/hotel/7"}
        assert exc.context == {
            "path": "/api/v1/hotel/7",
            "resource": "Hotel",
            "resource_id": 7,
        }
