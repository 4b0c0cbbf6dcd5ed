"""Board Pydantic models."""

from __future__ import annotations

from pydantic import Field

from ..cards.models import CardResponse
from ..models import WireModel


class BoardCreate(WireModel):
    name: str = Field(min_length=1)


class BoardUpdate(WireModel):
    name: str = Field(min_length=1)


class BoardResponse(WireModel):
    id: str
    name: str
    created_at: str
    updated_at: str


class FullBoardResponse(WireModel):
    board: BoardResponse
    cards: list[CardResponse]
