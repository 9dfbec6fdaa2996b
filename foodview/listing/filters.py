from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from ..catalog.config import DEFAULT_CATALOG_CONFIG
from ..catalog.models import CatalogEntity


def _frame(entities: Sequence[CatalogEntity]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "name": [e.name for e in entities],
            "area_name": [e.area_name for e in entities],
            "avg_rating": pd.Series([e.avg_rating for e in entities], dtype="float64"),
            "cuisines": [e.cuisines for e in entities],
        }
    )


def _select(entities: Sequence[CatalogEntity], mask: pd.Series) -> list[CatalogEntity]:
    return [e for e, keep in zip(entities, mask.tolist()) if keep]


def filter_by_name(entities: Sequence[CatalogEntity], text: str) -> list[CatalogEntity]:
    """Keep entities whose name contains ``text``, ignoring case. Order is preserved."""
    if not entities:
        return []
    df = _frame(entities)
    needle = text.lower()
    mask = df["name"].fillna("").str.lower().str.contains(needle, regex=False)
    return _select(entities, mask)


def filter_top_rated(
    entities: Sequence[CatalogEntity],
    threshold: float = DEFAULT_CATALOG_CONFIG.rating_threshold,
) -> list[CatalogEntity]:
    """Keep entities rated strictly above ``threshold``; unrated ones are dropped."""
    if not entities:
        return []
    df = _frame(entities)
    mask = df["avg_rating"].gt(threshold)
    return _select(entities, mask)


def summarize(entities: Sequence[CatalogEntity]) -> dict[str, Any]:
    if not entities:
        return {"count": 0, "areas": [], "cuisines": [], "avg_rating": None}
    df = _frame(entities)
    cuisines: set[str] = set()
    for values in df["cuisines"]:
        for c in values:
            c = c.strip()
            if c:
                cuisines.add(c)
    ratings = df["avg_rating"].dropna()
    return {
        "count": len(entities),
        "areas": sorted(df["area_name"].dropna().unique().tolist()),
        "cuisines": sorted(cuisines),
        "avg_rating": round(float(ratings.mean()), 2) if not ratings.empty else None,
    }
