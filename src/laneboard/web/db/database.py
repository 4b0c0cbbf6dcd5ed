"""Async SQLite connection manager (singleton pattern)."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from weakref import WeakKeyDictionary

import aiosqlite

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

_db: aiosqlite.Connection | None = None
_write_locks: WeakKeyDictionary[aiosqlite.Connection, asyncio.Lock] = WeakKeyDictionary()


def write_lock(db: aiosqlite.Connection) -> asyncio.Lock:
    """Lock serializing write transactions on a shared connection."""
    lock = _write_locks.get(db)
    if lock is None:
        lock = _write_locks[db] = asyncio.Lock()
    return lock


async def connect(db_path: str) -> aiosqlite.Connection:
    """Open a connection with row access by name and the schema applied."""
    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    conn.row_factory = aiosqlite.Row
    await conn.execute("PRAGMA foreign_keys=ON")
    await conn.executescript(SCHEMA_PATH.read_text())
    await conn.commit()
    return conn


async def init_db(db_path: str) -> None:
    """Initialize the shared database connection."""
    global _db
    if _db is not None:
        await _db.close()
    _db = await connect(db_path)
    if db_path != ":memory:":
        await _db.execute("PRAGMA journal_mode=WAL")
    logger.info("Database ready at %s", db_path)


async def get_db() -> aiosqlite.Connection:
    """Get the active database connection."""
    if _db is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _db


async def close_db() -> None:
    """Close the database connection."""
    global _db
    if _db is not None:
        await _db.close()
        _db = None
