"""Card Pydantic models."""

from __future__ import annotations

from pydantic import Field, field_validator

from ...ordering import Column
from ..models import WireModel


class CardCreate(WireModel):
    title: str = Field(min_length=1)
    description: str | None = None
    column: Column = Column.TODO


class CardUpdate(WireModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None


class CardResponse(WireModel):
    id: str
    board_id: str
    column: Column
    order: int
    title: str
    description: str | None = None


class ReorderItemModel(WireModel):
    card_id: str = Field(min_length=1)
    column: Column


class ReorderRequest(WireModel):
    items: list[ReorderItemModel]


class ReorderResponse(WireModel):
    status: str = "ok"
    updated: int


class DragRequest(WireModel):
    active_id: str = Field(min_length=1)
    over_id: str | None = None

    @field_validator("active_id", "over_id", mode="before")
    @classmethod
    def _ids_as_text(cls, value):
        # drag libraries may hand out numeric ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("over_id")
    @classmethod
    def _blank_target_is_none(cls, value: str | None) -> str | None:
        return value or None


class DragResponse(WireModel):
    changed: bool
    cards: list[CardResponse]
