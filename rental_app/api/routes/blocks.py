from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rental_app.core.deps import get_db
from rental_app.schemas.block import BlockCreate, BlockOut
from rental_app.schemas.booking import OkResponse
from rental_app.services.block_service import create_block, delete_block, list_blocks

router = APIRouter()


@router.get("", response_model=list[BlockOut])
def get_blocks(property_id: int | None = None, db: Session = Depends(get_db)):
    return list_blocks(db, property_id)


@router.post("", response_model=BlockOut)
def post_block(payload: BlockCreate, db: Session = Depends(get_db)):
    return create_block(db, payload)


@router.delete("/{block_id}", response_model=OkResponse)
def remove_block(block_id: int, db: Session = Depends(get_db)):
    delete_block(db, block_id)
    return OkResponse()
