"""Order normalization."""

from __future__ import annotations

from dataclasses import replace

from .columns import CANONICAL_COLUMNS
from .models import Card


def normalize_orders(cards: list[Card]) -> list[Card]:
    """Regroup cards by canonical column and renumber each column from 0.

    Within a column, cards keep their relative order; equal ``order`` values
    keep their input sequence. The input list is not modified.
    """
    if not cards:
        return cards

    result: list[Card] = []
    for column in CANONICAL_COLUMNS:
        group = sorted((c for c in cards if c.column == column), key=lambda c: c.order)
        result.extend(replace(card, order=index) for index, card in enumerate(group))
    return result
