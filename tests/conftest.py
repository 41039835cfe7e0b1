from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import rental_app.models  # noqa: F401
from rental_app.core.deps import get_db
from rental_app.db.base import Base
from rental_app.main import create_app
from rental_app.models import Block, Booking, Guest, Property, PropertyOwner
from rental_app.services.property_lock import PropertyLockRegistry


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def owner(db):
    o = PropertyOwner(name="Olivia Owner")
    db.add(o)
    db.commit()
    return o


@pytest.fixture
def beach_house(db, owner):
    p = Property(name="Beach House", owner_id=owner.id)
    db.add(p)
    db.commit()
    return p


@pytest.fixture
def cabin(db, owner):
    p = Property(name="Mountain Cabin", owner_id=owner.id)
    db.add(p)
    db.commit()
    return p


@pytest.fixture
def guest(db):
    g = Guest(full_name="Jane Doe")
    db.add(g)
    db.commit()
    return g


@pytest.fixture
def other_guest(db):
    g = Guest(full_name="John Roe")
    db.add(g)
    db.commit()
    return g


@pytest.fixture
def add_booking(db):
    """Insert a booking directly, bypassing the conflict engine."""

    def _add(prop: Property, guest: Guest, start: date, end: date) -> Booking:
        b = Booking(property_id=prop.id, guest_id=guest.id, start_date=start, end_date=end)
        db.add(b)
        db.commit()
        return b

    return _add


@pytest.fixture
def add_block(db):
    def _add(prop: Property, start: date, end: date, reason: str = "") -> Block:
        b = Block(property_id=prop.id, start_date=start, end_date=end, reason=reason)
        db.add(b)
        db.commit()
        return b

    return _add


@pytest.fixture
def lock_registry():
    return PropertyLockRegistry()


@pytest.fixture
def client(session_factory):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
