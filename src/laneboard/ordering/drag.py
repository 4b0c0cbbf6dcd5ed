"""Drag resolution: turn a completed drag gesture into new card positions."""

from __future__ import annotations

import logging
from dataclasses import replace

from .columns import apply_column_order, find_card, ordered_ids_for_column, parse_column
from .models import Card, DragResult

logger = logging.getLogger(__name__)


def _array_move(ids: list[str], from_index: int, to_index: int) -> list[str]:
    moved = list(ids)
    moved.insert(to_index, moved.pop(from_index))
    return moved


def _unchanged(cards: list[Card], reason: str, *args: object) -> DragResult:
    logger.debug("Drag ignored: " + reason, *args)
    return DragResult(changed=False, cards=cards)


def resolve_drag(cards: list[Card], active_id: str, over_id: str | None) -> DragResult:
    """Compute the card list after dropping ``active_id`` onto ``over_id``.

    ``over_id`` is either a column name (dropped on the column itself, which
    means "end of that column") or another card's id (dropped on that card,
    which means "take that card's place"). ``None`` means the card was
    released outside any drop target.

    Inapplicable drags return ``DragResult(changed=False)`` holding the very
    list that was passed in. A resolved drag renumbers only the source and
    target columns, and only the dragged card can change column.
    """
    if over_id is None:
        return _unchanged(cards, "no drop target for %s", active_id)
    if active_id == over_id:
        return _unchanged(cards, "%s dropped on itself", active_id)

    active = find_card(cards, active_id)
    if active is None:
        return _unchanged(cards, "unknown card %s", active_id)

    over_column = parse_column(over_id)
    over_card = None if over_column is not None else find_card(cards, over_id)
    if over_column is None and over_card is None:
        return _unchanged(cards, "unknown drop target %s", over_id)

    target_column = over_column if over_column is not None else over_card.column

    if target_column == active.column:
        ordered = ordered_ids_for_column(cards, target_column)
        from_index = ordered.index(active_id)
        to_index = len(ordered) - 1 if over_card is None else ordered.index(over_id)
        if from_index == to_index:
            return _unchanged(cards, "%s already at position %d", active_id, from_index)
        return DragResult(
            changed=True,
            cards=apply_column_order(
                cards, target_column, _array_move(ordered, from_index, to_index)
            ),
        )

    source_ids = [cid for cid in ordered_ids_for_column(cards, active.column) if cid != active_id]
    target_ids = [cid for cid in ordered_ids_for_column(cards, target_column) if cid != active_id]
    if over_card is None:
        insert_index = len(target_ids)
    elif over_id in target_ids:
        insert_index = target_ids.index(over_id)
    else:
        return _unchanged(cards, "%s not found in %s", over_id, target_column)
    target_ids.insert(insert_index, active_id)

    moved = [replace(c, column=target_column) if c.id == active_id else c for c in cards]
    moved = apply_column_order(moved, active.column, source_ids)
    moved = apply_column_order(moved, target_column, target_ids)
    logger.debug(
        "Moved %s from %s to %s at %d", active_id, active.column, target_column, insert_index
    )
    return DragResult(changed=True, cards=moved)
