"""Domain error taxonomy shared by the Home Rental apps.

Service functions raise these; the DRF exception handler in
``shared.exception_handler`` turns them into JSON responses.
"""

from __future__ import annotations

from rest_framework import status  # type: ignore


class DomainError(Exception):
    """Base class for errors surfaced to the caller as an HTTP response."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request could not be processed."
    code = "error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."
    code = "not_found"


class NotAuthorized(DomainError):
    """The actor has no relationship to the resource that allows the action."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not allowed."
    code = "not_authorized"


class InvalidTransition(DomainError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Booking status does not allow this change."
    code = "invalid_transition"


class DuplicateBooking(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "You already have a booking for this property."
    code = "duplicate_booking"


class Unauthenticated(DomainError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required."
    code = "unauthenticated"


class InvalidResetToken(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid or expired token."
    code = "invalid_reset_token"
