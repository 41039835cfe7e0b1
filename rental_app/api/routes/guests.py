from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from rental_app.core.deps import get_db
from rental_app.core.errors import GuestNotFound
from rental_app.models.guest import Guest
from rental_app.schemas.guest import GuestCreate, GuestOut

router = APIRouter()


@router.get("", response_model=list[GuestOut])
def list_guests(db: Session = Depends(get_db)):
    return db.execute(select(Guest).order_by(Guest.id)).scalars().all()


@router.get("/{guest_id}", response_model=GuestOut)
def get_guest(guest_id: int, db: Session = Depends(get_db)):
    g = db.get(Guest, guest_id)
    if not g:
        raise GuestNotFound(guest_id)
    return g


@router.post("", response_model=GuestOut)
def create_guest(payload: GuestCreate, db: Session = Depends(get_db)):
    g = Guest(full_name=payload.full_name)
    db.add(g)
    db.commit()
    db.refresh(g)
    return g
