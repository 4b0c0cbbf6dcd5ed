"""End-to-end tests for the HTTP API."""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from laneboard.web.app import create_app
from laneboard.web.config import WebConfig
from laneboard.web.db.database import close_db, init_db


@pytest_asyncio.fixture
async def api(tmp_path):
    """An HTTP client bound to a fresh app and database."""
    db_path = str(tmp_path / "api.db")
    app = create_app(WebConfig(db_path=db_path))
    await init_db(db_path)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    await close_db()


async def _board(api: httpx.AsyncClient, name: str = "Board A") -> str:
    res = await api.post("/api/boards", json={"name": name})
    assert res.status_code == 201
    return res.json()["id"]


async def _card(api: httpx.AsyncClient, board_id: str, title: str, column: str) -> str:
    res = await api.post(f"/api/boards/{board_id}/cards", json={"title": title, "column": column})
    assert res.status_code == 201
    return res.json()["id"]


async def _cards(api: httpx.AsyncClient, board_id: str) -> dict[str, dict]:
    res = await api.get(f"/api/boards/{board_id}")
    assert res.status_code == 200
    return {c["id"]: c for c in res.json()["cards"]}


class TestHealth:
    async def test_health(self, api):
        res = await api.get("/api/health")
        assert res.json() == {"status": "ok"}


class TestBoards:
    async def test_create_board_returns_id(self, api):
        res = await api.post("/api/boards", json={"name": "Board A"})

        assert res.status_code == 201
        body = res.json()
        assert body["id"]
        assert body["name"] == "Board A"
        assert "createdAt" in body

    async def test_blank_name_rejected(self, api):
        res = await api.post("/api/boards", json={"name": "   "})
        assert res.status_code == 422

    async def test_get_board_returns_board_and_cards(self, api):
        board_id = await _board(api)

        res = await api.get(f"/api/boards/{board_id}")

        assert res.status_code == 200
        body = res.json()
        assert body["board"]["id"] == board_id
        assert body["cards"] == []

    async def test_missing_board(self, api):
        res = await api.get("/api/boards/nope")
        assert res.status_code == 404

    async def test_rename_board(self, api):
        board_id = await _board(api)

        res = await api.patch(f"/api/boards/{board_id}", json={"name": "Renamed"})

        assert res.status_code == 200
        assert res.json()["name"] == "Renamed"

    async def test_delete_board_removes_cards(self, api):
        board_id = await _board(api)
        await _card(api, board_id, "Gone", "todo")

        res = await api.delete(f"/api/boards/{board_id}")

        assert res.status_code == 204
        assert (await api.get(f"/api/boards/{board_id}")).status_code == 404
        assert (await api.delete(f"/api/boards/{board_id}")).status_code == 404


class TestCards:
    async def test_create_card_appends(self, api):
        board_id = await _board(api)

        first = await api.post(
            f"/api/boards/{board_id}/cards",
            json={"title": "First task", "description": "Details", "column": "todo"},
        )
        second = await api.post(f"/api/boards/{board_id}/cards", json={"title": "Second"})

        assert first.json()["order"] == 0
        assert first.json()["boardId"] == board_id
        assert second.json()["column"] == "todo"
        assert second.json()["order"] == 1

    async def test_unknown_column_rejected(self, api):
        board_id = await _board(api)

        res = await api.post(
            f"/api/boards/{board_id}/cards", json={"title": "X", "column": "archived"}
        )

        assert res.status_code == 422

    async def test_create_card_on_missing_board(self, api):
        res = await api.post("/api/boards/nope/cards", json={"title": "X"})
        assert res.status_code == 404

    async def test_update_card(self, api):
        board_id = await _board(api)
        card_id = await _card(api, board_id, "Old", "todo")

        res = await api.patch(
            f"/api/boards/{board_id}/cards/{card_id}", json={"title": "New"}
        )

        assert res.status_code == 200
        assert res.json()["title"] == "New"

    async def test_update_missing_card(self, api):
        board_id = await _board(api)
        res = await api.patch(f"/api/boards/{board_id}/cards/nope", json={"title": "New"})
        assert res.status_code == 404

    async def test_delete_card_compacts(self, api):
        board_id = await _board(api)
        first = await _card(api, board_id, "One", "todo")
        second = await _card(api, board_id, "Two", "todo")

        res = await api.delete(f"/api/boards/{board_id}/cards/{first}")

        assert res.status_code == 204
        cards = await _cards(api, board_id)
        assert list(cards) == [second]
        assert cards[second]["order"] == 0


class TestReorder:
    async def test_reorder_moves_card_to_done(self, api):
        board_id = await _board(api)
        card_id = await _card(api, board_id, "First task", "todo")

        res = await api.put(
            f"/api/boards/{board_id}/cards/reorder",
            json={"items": [{"cardId": card_id, "column": "done"}]},
        )

        assert res.status_code == 200
        assert res.json() == {"status": "ok", "updated": 1}
        moved = (await _cards(api, board_id))[card_id]
        assert moved["column"] == "done"
        assert moved["order"] == 0

    async def test_reorder_assigns_order_per_column(self, api):
        board_id = await _board(api, "Board B")
        todo_one = await _card(api, board_id, "Todo 1", "todo")
        todo_two = await _card(api, board_id, "Todo 2", "todo")
        done_one = await _card(api, board_id, "Done 1", "done")

        res = await api.put(
            f"/api/boards/{board_id}/cards/reorder",
            json={
                "items": [
                    {"cardId": todo_two, "column": "todo"},
                    {"cardId": todo_one, "column": "todo"},
                    {"cardId": done_one, "column": "done"},
                ]
            },
        )

        assert res.status_code == 200
        cards = await _cards(api, board_id)
        assert (cards[todo_two]["column"], cards[todo_two]["order"]) == ("todo", 0)
        assert (cards[todo_one]["column"], cards[todo_one]["order"]) == ("todo", 1)
        assert (cards[done_one]["column"], cards[done_one]["order"]) == ("done", 0)

    async def test_reorder_rejects_unknown_column(self, api):
        board_id = await _board(api)
        card_id = await _card(api, board_id, "X", "todo")

        res = await api.put(
            f"/api/boards/{board_id}/cards/reorder",
            json={"items": [{"cardId": card_id, "column": "later"}]},
        )

        assert res.status_code == 422
        assert (await _cards(api, board_id))[card_id]["column"] == "todo"


class TestDrag:
    async def test_drag_across_columns(self, api):
        board_id = await _board(api)
        a = await _card(api, board_id, "A", "todo")
        b = await _card(api, board_id, "B", "todo")
        c = await _card(api, board_id, "C", "in_progress")

        res = await api.post(
            f"/api/boards/{board_id}/cards/drag", json={"activeId": b, "overId": c}
        )

        assert res.status_code == 200
        assert res.json()["changed"] is True
        cards = await _cards(api, board_id)
        assert (cards[a]["column"], cards[a]["order"]) == ("todo", 0)
        assert (cards[b]["column"], cards[b]["order"]) == ("in_progress", 0)
        assert (cards[c]["column"], cards[c]["order"]) == ("in_progress", 1)

    async def test_drag_to_column_end(self, api):
        board_id = await _board(api)
        a = await _card(api, board_id, "A", "todo")
        b = await _card(api, board_id, "B", "todo")

        res = await api.post(
            f"/api/boards/{board_id}/cards/drag", json={"activeId": a, "overId": "todo"}
        )

        assert res.json()["changed"] is True
        cards = await _cards(api, board_id)
        assert cards[a]["order"] == 1
        assert cards[b]["order"] == 0

    @pytest.mark.parametrize("over_id", [None, "", "nowhere"])
    async def test_noop_drags(self, api, over_id):
        board_id = await _board(api)
        a = await _card(api, board_id, "A", "todo")
        await _card(api, board_id, "B", "todo")

        res = await api.post(
            f"/api/boards/{board_id}/cards/drag", json={"activeId": a, "overId": over_id}
        )

        assert res.status_code == 200
        assert res.json()["changed"] is False
        assert (await _cards(api, board_id))[a]["order"] == 0

    async def test_drag_on_missing_board(self, api):
        res = await api.post("/api/boards/nope/cards/drag", json={"activeId": "a", "overId": "b"})
        assert res.status_code == 404
