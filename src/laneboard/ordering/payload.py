"""Reorder payload derivation."""

from __future__ import annotations

from .models import Card, ReorderItem


def build_reorder_payload(cards: list[Card]) -> list[ReorderItem]:
    """Build the wire payload for persisting a card arrangement.

    Items are grouped by column, ``todo`` first, then ``in_progress``, then
    ``done``, and by ascending ``order`` within a column. That column sequence
    is what boards have always sent; it happens to be descending string order,
    not an ascending lexicographic comparison. The receiver derives each
    card's order from its position in its column group, so the secondary sort
    is what carries the arrangement.
    """
    by_order = sorted(cards, key=lambda c: c.order)
    by_column = sorted(by_order, key=lambda c: c.column.value, reverse=True)
    return [ReorderItem(card_id=card.id, column=card.column) for card in by_column]
