"""Per-column ordering primitives shared by the normalizer and the drag resolver."""

from __future__ import annotations

from dataclasses import replace

from .models import Card, Column

CANONICAL_COLUMNS: tuple[Column, ...] = tuple(Column)


def parse_column(value: str | None) -> Column | None:
    """Return the Column named by value, or None if it names no column."""
    if value is None:
        return None
    try:
        return Column(value)
    except ValueError:
        return None


def find_card(cards: list[Card], card_id: str) -> Card | None:
    for card in cards:
        if card.id == card_id:
            return card
    return None


def ordered_ids_for_column(cards: list[Card], column: Column) -> list[str]:
    """Ids of the cards in column, by ascending order (stable on ties)."""
    in_column = [card for card in cards if card.column == column]
    return [card.id for card in sorted(in_column, key=lambda c: c.order)]


def apply_column_order(cards: list[Card], column: Column, ordered_ids: list[str]) -> list[Card]:
    """Set order = index in ordered_ids for the cards of column listed there.

    Cards outside column, or not listed, are passed through as-is.
    """
    order_by_id = {card_id: index for index, card_id in enumerate(ordered_ids)}
    result = []
    for card in cards:
        next_order = order_by_id.get(card.id) if card.column == column else None
        if next_order is None:
            result.append(card)
        else:
            result.append(replace(card, order=next_order))
    return result
