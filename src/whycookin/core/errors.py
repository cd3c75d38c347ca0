"""Application error hierarchy.

Services raise these instead of ``HTTPException`` so they stay usable outside a
request. The handlers registered in ``whycookin.main`` turn each one into a JSON
body of the form ``{"detail": message}`` with the class's status code.
"""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    """Base class for every error the API reports to clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """A required field is missing or a value is not acceptable."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"


class UpstreamError(AppError):
    """A third-party lookup could not resolve the client's input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Upstream service returned no results"


class UnauthenticatedError(AppError):
    """The bearer token is absent, malformed, expired or unknown."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"


class ForbiddenError(AppError):
    """The caller is authenticated but the action is not permitted."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    """No row matches the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    """The write collides with an existing unique value."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class GeocoderUnavailableError(AppError):
    """The geocoding service could not be reached or answered with an error."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Geocoding service is unavailable"


class StorageError(AppError):
    """A database operation failed; the transaction has been rolled back."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"
