"""Drag session: apply drag-end events to a board snapshot and persist them."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from ..ordering import Card, DragResult, build_reorder_payload, normalize_orders, resolve_drag
from .client import BoardClient

logger = logging.getLogger(__name__)


def _clean_id(value: str | int | None) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class DragEndEvent:
    """A completed drag. ``over_id`` is None when released outside any target."""

    active_id: str | None
    over_id: str | None

    @classmethod
    def from_raw(cls, active_id: str | int | None, over_id: str | int | None) -> DragEndEvent:
        """Accept ids as a drag library reports them (numbers, padded strings)."""
        return cls(active_id=_clean_id(active_id), over_id=_clean_id(over_id))


class DragSession:
    """Holds the last acknowledged card snapshot of one board.

    Drag events are handled one at a time: each is resolved against the
    snapshot the server last accepted, and the snapshot only advances once
    the reorder write succeeds. A failed write leaves the snapshot untouched.
    """

    def __init__(self, client: BoardClient, board_id: str):
        self.client = client
        self.board_id = board_id
        self.cards: list[Card] = []
        self._lock = asyncio.Lock()

    async def load(self) -> list[Card]:
        """Fetch the board and replace the snapshot."""
        async with self._lock:
            _, cards = await self.client.get_board(self.board_id)
            self.cards = normalize_orders(cards)
            return self.cards

    async def handle_drag_end(self, event: DragEndEvent) -> DragResult:
        """Resolve a drag and ship the new arrangement if anything moved.

        Raises:
            ServerError: If the reorder could not be persisted.
        """
        async with self._lock:
            if event.active_id is None or event.over_id is None:
                return DragResult(changed=False, cards=self.cards)

            result = resolve_drag(self.cards, event.active_id, event.over_id)
            if not result.changed:
                return result

            await self.client.reorder_cards(self.board_id, build_reorder_payload(result.cards))
            self.cards = result.cards
            logger.info(
                "Board %s: moved %s onto %s", self.board_id, event.active_id, event.over_id
            )
            return result
