"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

import aiosqlite
from fastapi import Depends, HTTPException

from .db.database import get_db


async def _get_db() -> aiosqlite.Connection:
    return await get_db()


Db = Annotated[aiosqlite.Connection, Depends(_get_db)]


async def ensure_board_exists(db: aiosqlite.Connection, board_id: str) -> None:
    """Raise 404 if the board does not exist."""
    cursor = await db.execute("SELECT 1 FROM boards WHERE id = ?", (board_id,))
    if not await cursor.fetchone():
        raise HTTPException(status_code=404, detail="Board not found")
