"""Board service - business logic."""

from __future__ import annotations

import logging
import secrets

import aiosqlite

from ...ordering import normalize_orders
from ..cards.service import card_to_dict, load_cards
from ..db.database import write_lock

logger = logging.getLogger(__name__)


async def create_board(db: aiosqlite.Connection, name: str) -> dict:
    board_id = secrets.token_hex(5)
    async with write_lock(db):
        await db.execute(
            "INSERT INTO boards (id, name) VALUES (?, ?)", (board_id, name.strip())
        )
        await db.commit()
    logger.info("Created board %s", board_id)
    return await get_board(db, board_id)


async def get_board(db: aiosqlite.Connection, board_id: str) -> dict | None:
    cursor = await db.execute("SELECT * FROM boards WHERE id = ?", (board_id,))
    row = await cursor.fetchone()
    return dict(row) if row else None


async def get_board_with_cards(db: aiosqlite.Connection, board_id: str) -> dict | None:
    """Get a board and its cards, grouped by column and numbered from 0."""
    board = await get_board(db, board_id)
    if board is None:
        return None
    cards = normalize_orders(await load_cards(db, board_id))
    return {"board": board, "cards": [card_to_dict(c) for c in cards]}


async def rename_board(db: aiosqlite.Connection, board_id: str, name: str) -> dict | None:
    async with write_lock(db):
        cursor = await db.execute(
            "UPDATE boards SET name = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
            (name.strip(), board_id),
        )
        await db.commit()
    if cursor.rowcount == 0:
        return None
    return await get_board(db, board_id)


async def delete_board(db: aiosqlite.Connection, board_id: str) -> bool:
    """Delete a board and all of its cards."""
    async with write_lock(db):
        cursor = await db.execute("DELETE FROM boards WHERE id = ?", (board_id,))
        await db.commit()
    if cursor.rowcount == 0:
        return False
    logger.info("Deleted board %s", board_id)
    return True
