from __future__ import annotations

import logging
from datetime import date, timedelta

from sqlalchemy.orm import Session

from rental_app.core.errors import (
    BookingNotFound,
    GuestNotFound,
    InvalidDateFormat,
    InvalidDateRange,
    InvalidParameterValue,
    MissingParameter,
    PropertyAlreadyBooked,
    PropertyBlocked,
    PropertyNotFound,
)
from rental_app.models.booking import Booking
from rental_app.models.guest import Guest
from rental_app.models.property import Property
from rental_app.schemas.booking import BookingInfo
from rental_app.services.availability_service import has_block_overlap, has_booking_overlap, latest_booking_end
from rental_app.services.date_range import format_date, parse_date, validate_order

logger = logging.getLogger(__name__)


def require_booking_info(booking_info: BookingInfo | None) -> BookingInfo:
    if booking_info is None:
        raise MissingParameter("booking_info")
    if booking_info.property_id is None or booking_info.property_id <= 0:
        raise MissingParameter("property_id")
    if booking_info.guest_id is None or booking_info.guest_id <= 0:
        raise MissingParameter("guest_id")
    if not booking_info.start_date:
        raise MissingParameter("start_date")
    if not booking_info.end_date:
        raise MissingParameter("end_date")
    return booking_info


def parse_stay(start_text: str, end_text: str) -> tuple[date, date]:
    """Parse and order-check a requested stay.

    Any failure is reported as an illegal ``start_date or end_date`` value.
    """
    try:
        start = parse_date(start_text)
        end = parse_date(end_text)
        validate_order(start, end)
    except (InvalidDateFormat, InvalidDateRange):
        raise InvalidParameterValue("start_date or end_date")
    return start, end


def auto_adjust_start(start: date, latest_end: date | None) -> date:
    """Move a stay to begin the day after the property's latest booking.

    The shift is unconditional whenever the property has any booking; the
    requested start is only kept for a property with no bookings at all.
    """
    if latest_end is None:
        return start
    return latest_end + timedelta(days=1)


def _adjust_start(db: Session, property_id: int, start: date, end: date) -> date:
    latest_end = latest_booking_end(db, property_id)
    adjusted = auto_adjust_start(start, latest_end)
    if adjusted != start:
        logger.info(
            "Shifted start of property %s stay from %s to %s (latest booking ends %s)",
            property_id,
            format_date(start),
            format_date(adjusted),
            format_date(latest_end),
        )
    # The shift can push the start past the requested end
    validate_order(adjusted, end)
    return adjusted


def check_conflicts(
    db: Session, *, property_id: int, start: date, end: date, exclude_booking_id: int | None = None
) -> None:
    if has_booking_overlap(db, property_id, start, end, exclude_booking_id=exclude_booking_id):
        logger.info("Rejected stay %s..%s on property %s: already booked", start, end, property_id)
        raise PropertyAlreadyBooked()
    if has_block_overlap(db, property_id, start, end):
        logger.info("Rejected stay %s..%s on property %s: blocked", start, end, property_id)
        raise PropertyBlocked()


def evaluate_booking(db: Session, booking_info: BookingInfo | None) -> Booking:
    """Validate a booking intent and return the resolved, unsaved Booking.

    An existing booking is only mutated after every check has passed, so a
    rejected update leaves the persisted row untouched.
    """
    info = require_booking_info(booking_info)

    if info.id is None:
        booking = Booking()
    else:
        booking = db.get(Booking, info.id)
        if booking is None:
            raise BookingNotFound(info.id)

    start, end = parse_stay(info.start_date, info.end_date)

    prop = db.get(Property, info.property_id)
    if prop is None:
        raise PropertyNotFound(info.property_id)
    guest = db.get(Guest, info.guest_id)
    if guest is None:
        raise GuestNotFound(info.guest_id)

    start = _adjust_start(db, prop.id, start, end)

    check_conflicts(db, property_id=prop.id, start=start, end=end, exclude_booking_id=booking.id)

    booking.property = prop
    booking.guest = guest
    booking.start_date = start
    booking.end_date = end
    return booking
