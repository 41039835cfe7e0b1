"""Error taxonomy for the booking service.

Every failure the core reports is a :class:`BookingError`. They are
``HTTPException`` subclasses so services can raise them directly and FastAPI
renders them as ``{"detail": {"code": ..., "message": ..., "params": [...]}}``.
None of them is retryable.
"""
from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status


class BookingError(HTTPException):
    code: str = "BOOKING_ERROR"
    status_code_default: int = status.HTTP_400_BAD_REQUEST
    message_template: str = "Booking request failed"

    def __init__(self, *params: Any) -> None:
        self.params = list(params)
        self.message = self.message_template.format(*params)
        super().__init__(
            status_code=self.status_code_default,
            detail={"code": self.code, "message": self.message, "params": [str(p) for p in params]},
        )

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class MissingParameter(BookingError):
    code = "PARAMETER_MANDATORY_ERROR"
    message_template = "Parameter '{0}' is mandatory"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(field)


class InvalidParameterValue(BookingError):
    code = "ILLEGAL_PARAMETER_VALUE_ERROR"
    message_template = "Illegal value for parameter '{0}'"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(field)


class InvalidDateFormat(BookingError):
    code = "INVALID_DATE_FORMAT"
    message_template = "Date '{0}' is not in yyyy-MM-dd format"


class InvalidDateRange(BookingError):
    code = "INVALID_DATE_RANGE"
    message_template = "Start date {0} must be before end date {1}"


class PropertyNotFound(BookingError):
    code = "PROPERTY_NOT_FOUND"
    status_code_default = status.HTTP_404_NOT_FOUND
    message_template = "Property {0} not found"


class GuestNotFound(BookingError):
    code = "GUEST_NOT_FOUND"
    status_code_default = status.HTTP_404_NOT_FOUND
    message_template = "Guest {0} not found"


class BookingNotFound(BookingError):
    code = "BOOKING_NOT_FOUND"
    status_code_default = status.HTTP_404_NOT_FOUND
    message_template = "Booking {0} not found"


class OwnerNotFound(BookingError):
    code = "OWNER_NOT_FOUND"
    status_code_default = status.HTTP_404_NOT_FOUND
    message_template = "Property owner {0} not found"


class BlockNotFound(BookingError):
    code = "BLOCK_NOT_FOUND"
    status_code_default = status.HTTP_404_NOT_FOUND
    message_template = "Block {0} not found"


class PropertyAlreadyBooked(BookingError):
    code = "PROPERTY_ALREADY_BOOKED"
    status_code_default = status.HTTP_409_CONFLICT
    message_template = "Property is already booked for the requested dates"


class PropertyBlocked(BookingError):
    code = "PROPERTY_BLOCKED"
    status_code_default = status.HTTP_409_CONFLICT
    message_template = "Property is blocked for the requested dates"
