from __future__ import annotations

from fastapi import APIRouter

from rental_app.api.routes import blocks, bookings, guests, properties

api_router = APIRouter()

api_router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
api_router.include_router(blocks.router, prefix="/blocks", tags=["blocks"])
api_router.include_router(properties.router, prefix="/properties", tags=["properties"])
api_router.include_router(properties.owners_router, prefix="/owners", tags=["owners"])
api_router.include_router(guests.router, prefix="/guests", tags=["guests"])
