# Import all models so that SQLAlchemy registers them for metadata.create_all
from rental_app.models.owner import PropertyOwner
from rental_app.models.property import Property
from rental_app.models.guest import Guest
from rental_app.models.booking import Booking
from rental_app.models.block import Block

__all__ = [
    "PropertyOwner",
    "Property",
    "Guest",
    "Booking",
    "Block",
]
