"""Card service - business logic."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Iterable

import aiosqlite

from ...ordering import Card, Column, DragResult, ReorderItem, build_reorder_payload, resolve_drag
from ..db.database import write_lock

logger = logging.getLogger(__name__)

_CARD_COLUMNS = (
    'id, board_id, column_name AS "column", position AS "order", title, description'
)


def row_to_card(row: aiosqlite.Row | dict) -> Card:
    data = dict(row)
    return Card(
        id=data["id"],
        column=Column(data["column"]),
        order=data["order"],
        title=data["title"],
        description=data["description"],
        board_id=data["board_id"],
    )


def card_to_dict(card: Card) -> dict:
    return {
        "id": card.id,
        "board_id": card.board_id,
        "column": card.column.value,
        "order": card.order,
        "title": card.title,
        "description": card.description,
    }


async def get_card(db: aiosqlite.Connection, board_id: str, card_id: str) -> dict | None:
    cursor = await db.execute(
        f"SELECT {_CARD_COLUMNS} FROM cards WHERE id = ? AND board_id = ?",
        (card_id, board_id),
    )
    row = await cursor.fetchone()
    return dict(row) if row else None


async def load_cards(db: aiosqlite.Connection, board_id: str) -> list[Card]:
    """Load a board's cards as ordering-engine snapshots."""
    cursor = await db.execute(
        f"SELECT {_CARD_COLUMNS} FROM cards WHERE board_id = ? "
        "ORDER BY column_name, position, rowid",
        (board_id,),
    )
    return [row_to_card(r) for r in await cursor.fetchall()]


async def create_card(
    db: aiosqlite.Connection,
    board_id: str,
    title: str,
    column: Column = Column.TODO,
    description: str | None = None,
) -> dict:
    """Create a card at the end of its column."""
    card_id = secrets.token_hex(8)

    async with write_lock(db):
        cursor = await db.execute(
            "SELECT COALESCE(MAX(position), -1) FROM cards WHERE board_id = ? AND column_name = ?",
            (board_id, column.value),
        )
        pos_row = await cursor.fetchone()
        position = pos_row[0] + 1

        await db.execute(
            """INSERT INTO cards (id, board_id, column_name, position, title, description)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (card_id, board_id, column.value, position, title, description),
        )
        await db.commit()
    return await get_card(db, board_id, card_id)


_CARD_UPDATABLE_FIELDS = {"title", "description"}


async def update_card(
    db: aiosqlite.Connection, board_id: str, card_id: str, updates: dict
) -> dict | None:
    """Edit title/description. Column and order only change through reorders."""
    card = await get_card(db, board_id, card_id)
    if not card:
        return None

    sets = []
    values = []
    for key, val in updates.items():
        if val is not None and key in _CARD_UPDATABLE_FIELDS:
            sets.append(f"{key} = ?")
            values.append(val)

    if not sets:
        return card

    sets.append("updated_at = CURRENT_TIMESTAMP")
    values.extend([card_id, board_id])

    async with write_lock(db):
        await db.execute(
            f"UPDATE cards SET {', '.join(sets)} WHERE id = ? AND board_id = ?", values
        )
        await db.commit()
    return await get_card(db, board_id, card_id)


async def delete_card(db: aiosqlite.Connection, board_id: str, card_id: str) -> bool:
    async with write_lock(db):
        card = await get_card(db, board_id, card_id)
        if not card:
            return False

        await db.execute("DELETE FROM cards WHERE id = ? AND board_id = ?", (card_id, board_id))
        await _compact_positions(db, board_id, card["column"])
        await db.commit()
    logger.info("Deleted card %s from board %s", card_id, board_id)
    return True


async def reorder_cards(
    db: aiosqlite.Connection, board_id: str, items: Iterable[ReorderItem]
) -> int:
    """Apply a reorder payload in a single transaction.

    Each card's order is its position among the payload items of the same
    column. Items naming cards of another board are skipped. Returns the
    number of cards updated.

    The whole batch is written by one ``executemany`` call under the
    connection's write lock, so readers sharing the connection see either
    none or all of it.
    """
    async with write_lock(db):
        updated = await _write_reorder(db, board_id, items)
    if updated:
        logger.info("Reordered %d cards on board %s", updated, board_id)
    return updated


async def apply_drag(
    db: aiosqlite.Connection, board_id: str, active_id: str, over_id: str | None
) -> DragResult:
    """Resolve a drag against the stored cards and persist the outcome."""
    async with write_lock(db):
        cards = await load_cards(db, board_id)
        result = resolve_drag(cards, active_id, over_id)
        if result.changed:
            await _write_reorder(db, board_id, build_reorder_payload(result.cards))
    return result


async def _write_reorder(
    db: aiosqlite.Connection, board_id: str, items: Iterable[ReorderItem]
) -> int:
    next_position: dict[Column, int] = {}
    params = []
    for item in items:
        position = next_position.get(item.column, 0)
        next_position[item.column] = position + 1
        params.append((item.column.value, position, item.card_id, board_id))
    if not params:
        return 0

    try:
        cursor = await db.executemany(
            """UPDATE cards SET column_name = ?, position = ?,
               updated_at = CURRENT_TIMESTAMP
               WHERE id = ? AND board_id = ?""",
            params,
        )
        await db.commit()
    except aiosqlite.Error:
        await db.rollback()
        logger.exception("Reorder of board %s rolled back", board_id)
        raise
    return cursor.rowcount


async def _compact_positions(db: aiosqlite.Connection, board_id: str, column: str) -> None:
    """Renumber a column's card positions sequentially from 0."""
    cursor = await db.execute(
        "SELECT id FROM cards WHERE board_id = ? AND column_name = ? ORDER BY position",
        (board_id, column),
    )
    rows = await cursor.fetchall()
    for i, row in enumerate(rows):
        await db.execute("UPDATE cards SET position = ? WHERE id = ?", (i, row["id"]))
