from __future__ import annotations

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from rental_app.models.block import Block
from rental_app.models.booking import Booking

# Range predicates are half-open: a row intersects [start, end) iff
# row.start_date < end and row.end_date > start. Nothing here is cached.


def latest_booking_end(db: Session, property_id: int) -> date | None:
    # Scalar lookup over all bookings of the property, independent of any requested range
    q = select(func.max(Booking.end_date)).where(Booking.property_id == property_id)
    return db.execute(q).scalar_one_or_none()


def has_booking_overlap(
    db: Session, property_id: int, start: date, end: date, exclude_booking_id: int | None = None
) -> bool:
    q = (
        select(Booking.id)
        .where(Booking.property_id == property_id)
        .where(Booking.start_date < end)
        .where(Booking.end_date > start)
    )
    if exclude_booking_id is not None:
        q = q.where(Booking.id != exclude_booking_id)
    q = q.limit(1)
    return db.execute(q).first() is not None


def has_block_overlap(db: Session, property_id: int, start: date, end: date) -> bool:
    q = (
        select(Block.id)
        .where(Block.property_id == property_id)
        .where(Block.start_date < end)
        .where(Block.end_date > start)
        .limit(1)
    )
    return db.execute(q).first() is not None


def find_bookings_in_range(db: Session, start: date, end: date) -> list[Booking]:
    q = (
        select(Booking)
        .where(Booking.start_date < end)
        .where(Booking.end_date > start)
        .order_by(Booking.start_date.asc(), Booking.id.asc())
    )
    return list(db.execute(q).scalars().all())
