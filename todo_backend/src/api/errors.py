from __future__ import annotations

from fastapi import status


# PUBLIC_INTERFACE
class ServiceError(Exception):
    """
    Base class for errors raised by the todo service.

    Each subclass carries the HTTP status code the boundary layer should use
    when the error escapes a request handler.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Caller supplied malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    """No record matched the given identifier."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """A uniqueness rule rejected the write."""

    status_code = status.HTTP_409_CONFLICT


class InternalError(ServiceError):
    """Opaque storage fault; the message is the engine's, verbatim."""
