from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from rental_app.core.deps import get_db
from rental_app.core.errors import OwnerNotFound, PropertyNotFound
from rental_app.models.owner import PropertyOwner
from rental_app.models.property import Property
from rental_app.schemas.property import OwnerCreate, OwnerOut, PropertyCreate, PropertyOut

router = APIRouter()
owners_router = APIRouter()


@owners_router.get("", response_model=list[OwnerOut])
def list_owners(db: Session = Depends(get_db)):
    return db.execute(select(PropertyOwner).order_by(PropertyOwner.id)).scalars().all()


@owners_router.post("", response_model=OwnerOut)
def create_owner(payload: OwnerCreate, db: Session = Depends(get_db)):
    o = PropertyOwner(name=payload.name)
    db.add(o)
    db.commit()
    db.refresh(o)
    return o


@router.get("", response_model=list[PropertyOut])
def list_properties(owner_id: int | None = None, db: Session = Depends(get_db)):
    q = select(Property).order_by(Property.id)
    if owner_id is not None:
        q = q.where(Property.owner_id == owner_id)
    return db.execute(q).scalars().all()


@router.get("/{property_id}", response_model=PropertyOut)
def get_property(property_id: int, db: Session = Depends(get_db)):
    p = db.get(Property, property_id)
    if not p:
        raise PropertyNotFound(property_id)
    return p


@router.post("", response_model=PropertyOut)
def create_property(payload: PropertyCreate, db: Session = Depends(get_db)):
    if db.get(PropertyOwner, payload.owner_id) is None:
        raise OwnerNotFound(payload.owner_id)
    p = Property(name=payload.name, owner_id=payload.owner_id)
    db.add(p)
    db.commit()
    db.refresh(p)
    return p
