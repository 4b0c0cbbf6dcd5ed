"""Board routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response

from ..deps import Db
from . import service
from .models import BoardCreate, BoardResponse, BoardUpdate, FullBoardResponse

router = APIRouter(prefix="/api", tags=["boards"])


@router.post("/boards", response_model=BoardResponse, status_code=201)
async def create_board(body: BoardCreate, db: Db):
    return await service.create_board(db, body.name)


@router.get("/boards/{board_id}", response_model=FullBoardResponse)
async def get_board(board_id: str, db: Db):
    board = await service.get_board_with_cards(db, board_id)
    if board is None:
        raise HTTPException(status_code=404, detail="Board not found")
    return board


@router.patch("/boards/{board_id}", response_model=BoardResponse)
async def rename_board(board_id: str, body: BoardUpdate, db: Db):
    board = await service.rename_board(db, board_id, body.name)
    if board is None:
        raise HTTPException(status_code=404, detail="Board not found")
    return board


@router.delete("/boards/{board_id}", status_code=204)
async def delete_board(board_id: str, db: Db):
    deleted = await service.delete_board(db, board_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Board not found")
    return Response(status_code=204)
