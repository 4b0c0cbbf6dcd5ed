"""Card routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response

from ...ordering import ReorderItem
from ..deps import Db, ensure_board_exists
from . import service
from .models import (
    CardCreate,
    CardResponse,
    CardUpdate,
    DragRequest,
    DragResponse,
    ReorderRequest,
    ReorderResponse,
)

router = APIRouter(prefix="/api/boards/{board_id}/cards", tags=["cards"])


@router.post("", response_model=CardResponse, status_code=201)
async def create_card(board_id: str, body: CardCreate, db: Db):
    await ensure_board_exists(db, board_id)
    return await service.create_card(
        db,
        board_id,
        title=body.title,
        column=body.column,
        description=body.description,
    )


@router.put("/reorder", response_model=ReorderResponse)
async def reorder_cards(board_id: str, body: ReorderRequest, db: Db):
    await ensure_board_exists(db, board_id)
    items = [ReorderItem(card_id=i.card_id, column=i.column) for i in body.items]
    updated = await service.reorder_cards(db, board_id, items)
    return ReorderResponse(updated=updated)


@router.post("/drag", response_model=DragResponse)
async def drag_card(board_id: str, body: DragRequest, db: Db):
    """Resolve a drag-end event on the server and persist the new arrangement."""
    await ensure_board_exists(db, board_id)
    result = await service.apply_drag(db, board_id, body.active_id, body.over_id)
    return {
        "changed": result.changed,
        "cards": [service.card_to_dict(c) for c in result.cards],
    }


@router.patch("/{card_id}", response_model=CardResponse)
async def update_card(board_id: str, card_id: str, body: CardUpdate, db: Db):
    updates = body.model_dump(exclude_none=True)
    card = await service.update_card(db, board_id, card_id, updates)
    if card is None:
        raise HTTPException(status_code=404, detail="Card not found")
    return card


@router.delete("/{card_id}", status_code=204)
async def delete_card(board_id: str, card_id: str, db: Db):
    deleted = await service.delete_card(db, board_id, card_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Card not found")
    return Response(status_code=204)
