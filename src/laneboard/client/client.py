"""HTTP client for communicating with a laneboard server.

Wraps the board and card API: loading boards, card CRUD, and shipping
reorder payloads produced by the ordering engine.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import httpx

from ..ordering import Card, Column, ReorderItem

logger = logging.getLogger(__name__)


class ServerError(Exception):
    """Raised when a server API call fails."""

    def __init__(self, message: str, status_code: int = 0, detail: str = ""):
        self.message = message
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


def card_from_wire(data: dict[str, Any]) -> Card:
    """Build an engine card from a camelCase card response."""
    return Card(
        id=data["id"],
        column=Column(data["column"]),
        order=int(data["order"]),
        title=data.get("title", ""),
        description=data.get("description"),
        board_id=data.get("boardId", ""),
    )


class BoardClient:
    """HTTP client for the laneboard API.

    All methods are async and raise ServerError on failure.
    """

    def __init__(self, base_url: str, timeout: float = 30.0):
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={"Content-Type": "application/json"},
            timeout=httpx.Timeout(timeout),
        )

    # --- Boards ---

    async def create_board(self, name: str) -> dict[str, Any]:
        """Create a board.

        POST /api/boards
        """
        return await self._request("POST", "/api/boards", json={"name": name})

    async def get_board(self, board_id: str) -> tuple[dict[str, Any], list[Card]]:
        """Fetch a board and its cards.

        GET /api/boards/{board_id}

        Returns:
            The board dict and its cards as engine snapshots.
        """
        body = await self._request("GET", f"/api/boards/{board_id}")
        return body["board"], [card_from_wire(c) for c in body.get("cards", [])]

    async def rename_board(self, board_id: str, name: str) -> dict[str, Any]:
        """PATCH /api/boards/{board_id}"""
        return await self._request("PATCH", f"/api/boards/{board_id}", json={"name": name})

    async def delete_board(self, board_id: str) -> None:
        """DELETE /api/boards/{board_id}"""
        await self._request("DELETE", f"/api/boards/{board_id}")

    # --- Cards ---

    async def create_card(
        self,
        board_id: str,
        title: str,
        column: Column = Column.TODO,
        description: str | None = None,
    ) -> Card:
        """Create a card at the end of a column.

        POST /api/boards/{board_id}/cards
        """
        body: dict[str, Any] = {"title": title, "column": column.value}
        if description is not None:
            body["description"] = description
        data = await self._request("POST", f"/api/boards/{board_id}/cards", json=body)
        return card_from_wire(data)

    async def update_card(
        self,
        board_id: str,
        card_id: str,
        title: str | None = None,
        description: str | None = None,
    ) -> Card:
        """PATCH /api/boards/{board_id}/cards/{card_id}"""
        body = {k: v for k, v in (("title", title), ("description", description)) if v is not None}
        data = await self._request(
            "PATCH", f"/api/boards/{board_id}/cards/{card_id}", json=body
        )
        return card_from_wire(data)

    async def delete_card(self, board_id: str, card_id: str) -> None:
        """DELETE /api/boards/{board_id}/cards/{card_id}"""
        await self._request("DELETE", f"/api/boards/{board_id}/cards/{card_id}")

    async def reorder_cards(self, board_id: str, items: Iterable[ReorderItem]) -> dict[str, Any]:
        """Persist a reorder payload.

        PUT /api/boards/{board_id}/cards/reorder

        Args:
            board_id: Board the cards belong to.
            items: Payload from build_reorder_payload; order within each
                column is implied by position.

        Returns:
            Dict with 'status' and 'updated' keys.
        """
        payload = [item.to_dict() for item in items]
        logger.debug("Sending %d reorder items for board %s", len(payload), board_id)
        return await self._request(
            "PUT",
            f"/api/boards/{board_id}/cards/reorder",
            json={"items": payload},
        )

    async def drag(
        self, board_id: str, active_id: str, over_id: str | None
    ) -> tuple[bool, list[Card]]:
        """Let the server resolve and persist a drag.

        POST /api/boards/{board_id}/cards/drag

        Returns:
            Whether anything changed, and the resulting cards.
        """
        body = await self._request(
            "POST",
            f"/api/boards/{board_id}/cards/drag",
            json={"activeId": active_id, "overId": over_id},
        )
        return bool(body.get("changed")), [card_from_wire(c) for c in body.get("cards", [])]

    # --- Lifecycle ---

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    # --- Internal ---

    async def _request(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Make a request to the server.

        Raises:
            ServerError: On HTTP errors or connection failures.
        """
        try:
            response = await self._client.request(method, url, json=json)

            if response.status_code >= 400:
                detail = ""
                try:
                    body = response.json()
                    detail = body.get("detail", str(body))
                except Exception:
                    detail = response.text[:200]

                raise ServerError(
                    f"{method} {url} returned {response.status_code}: {detail}",
                    status_code=response.status_code,
                    detail=str(detail),
                )

            if not response.content:
                return {}

            return response.json()

        except httpx.ConnectError as e:
            raise ServerError(
                f"Cannot connect to server: {e}",
                detail=str(e),
            ) from e
        except httpx.TimeoutException as e:
            raise ServerError(
                f"Request timed out: {method} {url}",
                detail=str(e),
            ) from e
        except ServerError:
            raise
        except Exception as e:
            raise ServerError(
                f"Unexpected error: {e}",
                detail=str(e),
            ) from e
