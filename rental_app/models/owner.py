from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from rental_app.db.base import Base
from rental_app.models._mixins import TimestampMixin


class PropertyOwner(Base, TimestampMixin):
    __tablename__ = "property_owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
