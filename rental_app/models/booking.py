from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rental_app.db.base import Base
from rental_app.models._mixins import TimestampMixin
from rental_app.models.guest import Guest
from rental_app.models.property import Property


class Booking(Base, TimestampMixin):
    """A stay over the half-open interval [start_date, end_date)."""

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    property_id: Mapped[int] = mapped_column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
    guest_id: Mapped[int] = mapped_column(Integer, ForeignKey("guests.id"), nullable=False, index=True)

    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)

    property: Mapped[Property] = relationship("Property")
    guest: Mapped[Guest] = relationship("Guest")
