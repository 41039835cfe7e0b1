from __future__ import annotations

from pydantic import BaseModel, Field


class BlockCreate(BaseModel):
    property_id: int | None = None
    start_date: str | None = None
    end_date: str | None = None
    reason: str = Field(default="", max_length=255)


class BlockOut(BaseModel):
    id: int
    property_id: int
    start_date: str
    end_date: str
    reason: str
