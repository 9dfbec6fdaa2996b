from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..catalog.models import CatalogEntity


class ListingPhase(str, Enum):
    idle = "idle"
    loading = "loading"
    loaded = "loaded"
    filtered = "filtered"
    failed = "failed"


@dataclass
class ListingState:
    raw_entities: list[CatalogEntity] = field(default_factory=list)
    visible_entities: list[CatalogEntity] = field(default_factory=list)
    # Kept exactly as typed; only lowercased when compared.
    search_text: str = ""
