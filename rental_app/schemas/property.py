from __future__ import annotations

from pydantic import BaseModel, Field


class OwnerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)


class OwnerOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class PropertyCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    owner_id: int


class PropertyOut(BaseModel):
    id: int
    name: str
    owner_id: int

    class Config:
        from_attributes = True
