from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rental_app.db.base import Base
from rental_app.models._mixins import TimestampMixin
from rental_app.models.owner import PropertyOwner


class Property(Base, TimestampMixin):
    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    owner_id: Mapped[int] = mapped_column(Integer, ForeignKey("property_owners.id"), nullable=False, index=True)

    owner: Mapped[PropertyOwner] = relationship("PropertyOwner")
