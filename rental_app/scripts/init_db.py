from __future__ import annotations

import argparse
import logging

from sqlalchemy import select, text
from sqlalchemy.exc import ProgrammingError

from rental_app.core.logging_config import configure_logging
from rental_app.db.base import Base
from rental_app.db.session import SessionLocal, engine

# Import models to register with SQLAlchemy
import rental_app.models  # noqa: F401

logger = logging.getLogger(__name__)

# Storage-level safety net: no two bookings of a property may share a night
NO_OVERLAP_CONSTRAINT = """
ALTER TABLE bookings
ADD CONSTRAINT bookings_no_overlap
EXCLUDE USING gist (
    property_id WITH =,
    daterange(start_date, end_date, '[)') WITH &&
);
"""


def add_overlap_constraint() -> None:
    if engine.dialect.name != "postgresql":
        logger.info("Skipping exclusion constraint on %s", engine.dialect.name)
        return

    with engine.begin() as conn:
        conn.execute(text("CREATE EXTENSION IF NOT EXISTS btree_gist"))

    try:
        with engine.begin() as conn:
            conn.execute(text(NO_OVERLAP_CONSTRAINT))
    except ProgrammingError:
        logger.info("bookings_no_overlap already exists")


def seed_demo() -> None:
    from rental_app.models import Guest, Property, PropertyOwner

    db = SessionLocal()
    try:
        if db.execute(select(PropertyOwner.id).limit(1)).first() is not None:
            logger.info("Demo data already present")
            return
        owner = PropertyOwner(name="Demo Owner")
        db.add(owner)
        db.flush()
        db.add_all(
            [
                Property(name="Beach House", owner_id=owner.id),
                Property(name="Mountain Cabin", owner_id=owner.id),
                Guest(full_name="Jane Doe"),
                Guest(full_name="John Roe"),
            ]
        )
        db.commit()
        logger.info("Seeded demo owner, properties and guests")
    finally:
        db.close()


def main() -> int:
    parser = argparse.ArgumentParser(description="Create the booking database schema")
    parser.add_argument("--seed", action="store_true", help="insert demo owner, properties and guests")
    args = parser.parse_args()

    configure_logging()

    Base.metadata.create_all(bind=engine)
    add_overlap_constraint()

    if args.seed:
        seed_demo()

    print("DB initialized")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
