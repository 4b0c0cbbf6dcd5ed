"""Client side of the board: HTTP transport and drag-event handling."""

from .client import BoardClient, ServerError
from .config import ClientConfig
from .session import DragEndEvent, DragSession

__all__ = ["BoardClient", "ClientConfig", "DragEndEvent", "DragSession", "ServerError"]
