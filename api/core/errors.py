"""
API error taxonomy.

Every failure a route can report is one of these exceptions. `main.py`
registers a handler that renders them as `{"error": "<message>"}` with the
matching status code, so services raise and never build responses.

Usage:
    from core.errors import NotFoundError

    raise NotFoundError("Post not found")
"""

from __future__ import annotations

from fastapi import status


class ApiError(Exception):
    """Base exception for client-visible failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict[str, str]:
        return {"error": self.message}


class BadRequestError(ApiError):
    """Missing path parameter or unparseable request body."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class NotFoundError(ApiError):
    """The store confirmed that no row matches."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StoreFailureError(ApiError):
    """Connectivity, query or decode failure. The message stays generic."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class StoreError(RuntimeError):
    """
    Raised by stores for any driver-level failure.

    Never reaches a response: services convert it to `StoreFailureError`.
    """


class RowDecodeError(StoreError):
    """A row came back but could not be turned into a model."""
