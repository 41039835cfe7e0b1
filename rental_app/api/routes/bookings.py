from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from rental_app.core.deps import get_db
from rental_app.schemas.booking import BookingInfo, BookingResponse, CreateUpdateBookingResponse, OkResponse
from rental_app.services.booking_service import (
    create_or_update_booking,
    delete_booking,
    lookup_bookings,
    lookup_bookings_by_range,
)

router = APIRouter()


@router.post("", response_model=CreateUpdateBookingResponse)
def create_or_update(payload: BookingInfo, db: Session = Depends(get_db)):
    return create_or_update_booking(db, payload)


@router.put("/{booking_id}", response_model=CreateUpdateBookingResponse)
def update_booking(booking_id: int, payload: BookingInfo, db: Session = Depends(get_db)):
    return create_or_update_booking(db, payload.model_copy(update={"id": booking_id}))


@router.get("", response_model=BookingResponse)
def list_bookings(booking_id: int | None = Query(default=None), db: Session = Depends(get_db)):
    return lookup_bookings(db, booking_id)


@router.get("/range", response_model=BookingResponse)
def list_bookings_by_range(
    start_date: str | None = Query(default=None),
    end_date: str | None = Query(default=None),
    db: Session = Depends(get_db),
):
    return lookup_bookings_by_range(db, start_date, end_date)


@router.delete("/{booking_id}", response_model=OkResponse)
def remove_booking(booking_id: int, db: Session = Depends(get_db)):
    return delete_booking(db, booking_id)
