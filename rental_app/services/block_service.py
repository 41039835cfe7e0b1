from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from rental_app.core.errors import (
    BlockNotFound,
    BookingError,
    MissingParameter,
    PropertyAlreadyBooked,
    PropertyNotFound,
)
from rental_app.models.block import Block
from rental_app.models.property import Property
from rental_app.schemas.block import BlockCreate, BlockOut
from rental_app.services.availability_service import has_booking_overlap
from rental_app.services.conflict_engine import parse_stay
from rental_app.services.date_range import format_date
from rental_app.services.property_lock import PropertyLockRegistry, property_lock

logger = logging.getLogger(__name__)


def to_block_out(block: Block) -> BlockOut:
    return BlockOut(
        id=block.id,
        property_id=block.property_id,
        start_date=format_date(block.start_date),
        end_date=format_date(block.end_date),
        reason=block.reason,
    )


def create_block(db: Session, payload: BlockCreate, *, lock_registry: PropertyLockRegistry | None = None) -> BlockOut:
    if payload.property_id is None or payload.property_id <= 0:
        raise MissingParameter("property_id")
    if not payload.start_date:
        raise MissingParameter("start_date")
    if not payload.end_date:
        raise MissingParameter("end_date")

    start, end = parse_stay(payload.start_date, payload.end_date)

    with property_lock(db, payload.property_id, registry=lock_registry):
        try:
            if db.get(Property, payload.property_id) is None:
                raise PropertyNotFound(payload.property_id)

            # Blocks never displace accepted bookings
            if has_booking_overlap(db, payload.property_id, start, end):
                raise PropertyAlreadyBooked()
        except BookingError:
            # Release the property row lock taken by property_lock
            db.rollback()
            raise

        block = Block(property_id=payload.property_id, start_date=start, end_date=end, reason=payload.reason)
        db.add(block)
        db.commit()
        db.refresh(block)

    logger.info("Created block %s on property %s: %s..%s", block.id, block.property_id, start, end)
    return to_block_out(block)


def list_blocks(db: Session, property_id: int | None = None) -> list[BlockOut]:
    q = select(Block).order_by(Block.start_date.asc(), Block.id.asc())
    if property_id is not None:
        q = q.where(Block.property_id == property_id)
    return [to_block_out(b) for b in db.execute(q).scalars().all()]


def delete_block(db: Session, block_id: int) -> None:
    b = db.get(Block, block_id)
    if not b:
        raise BlockNotFound(block_id)
    db.delete(b)
    db.commit()
    logger.info("Deleted block %s", block_id)
