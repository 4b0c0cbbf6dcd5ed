"""Card ordering models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Column(StrEnum):
    """Board columns. Definition order is the canonical column sequence."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


@dataclass(frozen=True)
class Card:
    """A card snapshot. The ordering engine only ever replaces column and order."""

    id: str
    column: Column
    order: int
    title: str = ""
    description: str | None = None
    board_id: str = ""


@dataclass(frozen=True)
class ReorderItem:
    """One entry of a reorder payload; position in the payload implies order."""

    card_id: str
    column: Column

    def to_dict(self) -> dict[str, str]:
        return {"cardId": self.card_id, "column": self.column.value}


@dataclass(frozen=True)
class DragResult:
    """Outcome of resolving a drag.

    When ``changed`` is False, ``cards`` is the exact list that was passed in.
    """

    changed: bool
    cards: list[Card]
