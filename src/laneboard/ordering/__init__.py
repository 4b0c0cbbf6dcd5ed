"""Card ordering engine: normalization, drag resolution and reorder payloads."""

from .columns import (
    CANONICAL_COLUMNS,
    apply_column_order,
    find_card,
    ordered_ids_for_column,
    parse_column,
)
from .drag import resolve_drag
from .models import Card, Column, DragResult, ReorderItem
from .normalize import normalize_orders
from .payload import build_reorder_payload

__all__ = [
    "CANONICAL_COLUMNS",
    "Card",
    "Column",
    "DragResult",
    "ReorderItem",
    "apply_column_order",
    "build_reorder_payload",
    "find_card",
    "normalize_orders",
    "ordered_ids_for_column",
    "parse_column",
    "resolve_drag",
]
