from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from rental_app.core.errors import (
    BookingError,
    BookingNotFound,
    InvalidParameterValue,
    MissingParameter,
    PropertyAlreadyBooked,
)
from rental_app.models.booking import Booking
from rental_app.schemas.booking import BookingInfo, BookingResponse, CreateUpdateBookingResponse, OkResponse
from rental_app.services.availability_service import find_bookings_in_range
from rental_app.services.conflict_engine import evaluate_booking, parse_stay, require_booking_info
from rental_app.services.date_range import format_date
from rental_app.services.property_lock import PropertyLockRegistry, property_lock

logger = logging.getLogger(__name__)


def to_booking_info(booking: Booking) -> BookingInfo:
    return BookingInfo(
        id=booking.id,
        guest_id=booking.guest_id,
        property_id=booking.property_id,
        start_date=format_date(booking.start_date),
        end_date=format_date(booking.end_date),
    )


def create_or_update_booking(
    db: Session, booking_info: BookingInfo | None, *, lock_registry: PropertyLockRegistry | None = None
) -> CreateUpdateBookingResponse:
    info = require_booking_info(booking_info)
    if info.id is None:
        logger.info("Creating booking...")
    else:
        logger.info("Updating booking %s", info.id)

    with property_lock(db, info.property_id, registry=lock_registry):
        try:
            booking = evaluate_booking(db, info)
            db.add(booking)
            db.commit()
        except BookingError:
            db.rollback()
            raise
        except IntegrityError as exc:
            # bookings_no_overlap exclusion constraint (PostgreSQL only)
            db.rollback()
            raise PropertyAlreadyBooked() from exc
        db.refresh(booking)

    logger.info(
        "Booking %s saved: property=%s guest=%s %s..%s",
        booking.id,
        booking.property.name,
        booking.guest.full_name,
        format_date(booking.start_date),
        format_date(booking.end_date),
    )
    return CreateUpdateBookingResponse(id=booking.id)


def lookup_bookings(db: Session, booking_id: int | None) -> BookingResponse:
    logger.info("Looking up booking by id: %s", booking_id)
    response = BookingResponse()

    if booking_id is None:
        rows = db.execute(select(Booking).order_by(Booking.start_date.asc(), Booking.id.asc())).scalars().all()
        response.items = [to_booking_info(b) for b in rows]
    elif booking_id <= 0:
        raise InvalidParameterValue("booking_id")
    else:
        booking = db.get(Booking, booking_id)
        if booking is not None:
            response.items.append(to_booking_info(booking))

    return response


def lookup_bookings_by_range(db: Session, start_text: str | None, end_text: str | None) -> BookingResponse:
    if not start_text:
        raise MissingParameter("start_date")
    if not end_text:
        raise MissingParameter("end_date")

    start, end = parse_stay(start_text, end_text)

    logger.info("Looking up booking(s) by time range: %s - %s", start_text, end_text)
    return BookingResponse(items=[to_booking_info(b) for b in find_bookings_in_range(db, start, end)])


def delete_booking(db: Session, booking_id: int | None) -> OkResponse:
    if booking_id is None:
        raise MissingParameter("id")

    booking = db.get(Booking, booking_id)
    if booking is None:
        raise BookingNotFound(booking_id)

    logger.info("Deleting booking by id: %s", booking_id)
    db.delete(booking)
    db.commit()
    return OkResponse()
