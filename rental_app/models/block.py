from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rental_app.db.base import Base
from rental_app.models._mixins import TimestampMixin
from rental_app.models.property import Property


class Block(Base, TimestampMixin):
    """Owner-declared unavailability over [start_date, end_date)."""

    __tablename__ = "blocks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    property_id: Mapped[int] = mapped_column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)

    reason: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    property: Mapped[Property] = relationship("Property")
