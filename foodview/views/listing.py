from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..listing.state import ListingPhase
from .card import CardView
from .header import HeaderView
from .placeholder import PlaceholderUnit


class ViewKind(str, Enum):
    placeholder = "placeholder"
    cards = "cards"


class ListingView(BaseModel):
    kind: ViewKind
    phase: ListingPhase
    search_text: str = ""
    cards: list[CardView] = Field(default_factory=list)
    placeholders: list[PlaceholderUnit] = Field(default_factory=list)
    error: str | None = None


class PageView(BaseModel):
    header: HeaderView
    body: ListingView
