from __future__ import annotations

from pydantic import BaseModel, Field


class BookingInfo(BaseModel):
    """Transfer shape for a booking, used for both input and output.

    Every field is optional at the schema level so that missing values reach
    the conflict engine and are reported as ``PARAMETER_MANDATORY_ERROR``
    instead of a generic validation error.
    """

    id: int | None = None
    property_id: int | None = None
    guest_id: int | None = None
    start_date: str | None = Field(default=None, description="yyyy-MM-dd")
    end_date: str | None = Field(default=None, description="yyyy-MM-dd")


class CreateUpdateBookingResponse(BaseModel):
    id: int


class BookingResponse(BaseModel):
    items: list[BookingInfo] = Field(default_factory=list)


class OkResponse(BaseModel):
    ok: bool = True
