"""laneboard: Kanban board with a drag-and-drop card ordering engine.

laneboard provides:
- A pure ordering engine that resolves drag gestures into per-column orders
- A FastAPI service that persists boards and cards in SQLite
- An async client and drag session for shipping reorders to the service
- A terminal CLI for inspecting and rearranging boards

Usage:
    # CLI
    $ laneboard show <board-id>
    $ laneboard move <card-id> done --board <board-id>

    # Python API
    from laneboard import resolve_drag, build_reorder_payload

    result = resolve_drag(cards, "card-1", "in_progress")
    if result.changed:
        items = build_reorder_payload(result.cards)
"""

try:
    from importlib.metadata import version as _get_version

    __version__ = _get_version("laneboard")
except Exception:
    __version__ = "0.0.0-dev"


# Lazy imports keep the CLI and web app from paying for each other
def __getattr__(name: str):
    """Lazy import for main entry points."""
    if name in ("Card", "Column", "DragResult", "ReorderItem"):
        from . import ordering

        return getattr(ordering, name)
    if name in ("normalize_orders", "resolve_drag", "build_reorder_payload"):
        from . import ordering

        return getattr(ordering, name)
    if name == "BoardClient":
        from .client.client import BoardClient

        return BoardClient
    if name == "DragSession":
        from .client.session import DragSession

        return DragSession
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "__version__",
    "Card",
    "Column",
    "DragResult",
    "ReorderItem",
    "normalize_orders",
    "resolve_drag",
    "build_reorder_payload",
    "BoardClient",
    "DragSession",
]
