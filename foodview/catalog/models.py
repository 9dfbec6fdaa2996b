from __future__ import annotations

import math
from typing import Any, Mapping

from pydantic import BaseModel, Field


def _text(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value)
    return text if text else None


def _rating(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        rating = float(value) if isinstance(value, (int, float)) else float(str(value).strip())
    except (ValueError, OverflowError):
        return None
    return rating if math.isfinite(rating) else None


def _cuisines(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(c) for c in value if c is not None and str(c)]


class CatalogEntity(BaseModel):
    id: str | None = None
    name: str | None = None
    cuisines: list[str] = Field(default_factory=list)
    area_name: str | None = None
    avg_rating: float | None = None
    avg_rating_text: str | None = None
    delivery_eta_text: str | None = None
    cost_for_two_text: str | None = None
    image_ref: str | None = None

    @classmethod
    def from_info(cls, info: Mapping[str, Any]) -> "CatalogEntity":
        """
        Build an entity from the ``info`` block of one listing element.

        Missing or wrongly typed fields become ``None`` (or an empty
        cuisine list); this never raises.
        """
        sla = info.get("sla")
        eta = sla.get("slaString") if isinstance(sla, Mapping) else None
        return cls(
            id=_text(info.get("id")),
            name=_text(info.get("name")),
            cuisines=_cuisines(info.get("cuisines")),
            area_name=_text(info.get("areaName")),
            avg_rating=_rating(info.get("avgRating")),
            avg_rating_text=_text(info.get("avgRatingString")),
            delivery_eta_text=_text(eta),
            cost_for_two_text=_text(info.get("costForTwo")),
            image_ref=_text(info.get("cloudinaryImageId")),
        )
