from __future__ import annotations

import threading

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker

from rental_app.core.errors import BookingError
from rental_app.db.base import Base
from rental_app.models import Booking, Guest, Property, PropertyOwner
from rental_app.schemas.booking import BookingInfo
from rental_app.services.booking_service import create_or_update_booking
from rental_app.services.property_lock import PropertyLockRegistry, property_lock


def test_registry_returns_one_lock_per_property():
    registry = PropertyLockRegistry()

    assert registry.get(1) is registry.get(1)
    assert registry.get(1) is not registry.get(2)


def test_lock_is_held_for_the_critical_section(db, beach_house):
    registry = PropertyLockRegistry()

    with property_lock(db, beach_house.id, registry=registry):
        assert registry.get(beach_house.id).locked()
        assert not registry.get(beach_house.id + 1).locked()

    assert not registry.get(beach_house.id).locked()


def test_second_caller_waits_for_release(db, beach_house):
    registry = PropertyLockRegistry()
    acquired = threading.Event()

    def contender():
        with registry.get(beach_house.id):
            acquired.set()

    with property_lock(db, beach_house.id, registry=registry):
        t = threading.Thread(target=contender)
        t.start()
        assert not acquired.wait(timeout=0.1)

    t.join(timeout=1)
    assert acquired.is_set()


@pytest.fixture
def file_session_factory(tmp_path):
    # One connection per session, so each thread really runs its own transaction
    engine = create_engine(f"sqlite:///{tmp_path / 'bookings.db'}", connect_args={"check_same_thread": False, "timeout": 30})
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


def test_concurrent_requests_book_a_property_once(file_session_factory):
    seed = file_session_factory()
    owner = PropertyOwner(name="Olivia Owner")
    seed.add(owner)
    seed.flush()
    prop = Property(name="Beach House", owner_id=owner.id)
    guest = Guest(full_name="Jane Doe")
    seed.add_all([prop, guest])
    seed.commit()
    payload = BookingInfo(property_id=prop.id, guest_id=guest.id, start_date="2024-06-01", end_date="2024-06-10")
    seed.close()

    registry = PropertyLockRegistry()
    workers = 8
    barrier = threading.Barrier(workers)
    outcomes: list[str] = []
    outcomes_lock = threading.Lock()

    def attempt():
        db = file_session_factory()
        try:
            barrier.wait()
            create_or_update_booking(db, payload, lock_registry=registry)
            result = "saved"
        except BookingError as exc:
            result = exc.code
        finally:
            db.close()
        with outcomes_lock:
            outcomes.append(result)

    threads = [threading.Thread(target=attempt) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert outcomes.count("saved") == 1
    assert outcomes.count("INVALID_DATE_RANGE") == workers - 1

    check = file_session_factory()
    try:
        assert len(check.execute(select(Booking)).scalars().all()) == 1
    finally:
        check.close()
