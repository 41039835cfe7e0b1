from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import select
from sqlalchemy.orm import Session

from rental_app.models.property import Property

logger = logging.getLogger(__name__)


class PropertyLockRegistry:
    """One process-local lock per property id."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[int, threading.Lock] = {}

    def get(self, property_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(property_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[property_id] = lock
            return lock


_registry = PropertyLockRegistry()


@contextmanager
def property_lock(db: Session, property_id: int, registry: PropertyLockRegistry | None = None) -> Iterator[None]:
    """Critical section for read-decide-write on one property's calendar.

    Holds the in-process lock for ``property_id`` and takes a row lock on the
    property (``SELECT ... FOR UPDATE``) for the surrounding transaction.
    SQLite ignores the row lock, so the in-process lock is what serializes
    there.
    """
    lock = (registry or _registry).get(property_id)
    with lock:
        logger.debug("Acquired booking lock for property %s", property_id)
        db.execute(select(Property.id).where(Property.id == property_id).with_for_update())
        yield
