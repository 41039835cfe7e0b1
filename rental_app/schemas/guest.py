from __future__ import annotations

from pydantic import BaseModel, Field


class GuestCreate(BaseModel):
    full_name: str = Field(min_length=1, max_length=255)


class GuestOut(BaseModel):
    id: int
    full_name: str

    class Config:
        from_attributes = True
