from __future__ import annotations

from pydantic import BaseModel

from ..catalog.config import DEFAULT_CATALOG_CONFIG
from ..catalog.models import CatalogEntity


class CardView(BaseModel):
    key: str | None
    image_src: str | None = None
    title: str | None = None
    subtitle: str | None = None
    location: str | None = None
    rating: str | None = None
    delivery: str | None = None
    cost: str | None = None


def _format_rating(entity: CatalogEntity) -> str | None:
    # A zero rating falls back to the text.
    if entity.avg_rating:
        return f"Rating: {entity.avg_rating:g}"
    if entity.avg_rating_text:
        return f"Rating: {entity.avg_rating_text}"
    return None


def render_card(
    entity: CatalogEntity,
    image_base_url: str = DEFAULT_CATALOG_CONFIG.image_base_url,
) -> CardView:
    """Render one restaurant card. Absent fields are omitted, never raised on."""
    return CardView(
        key=entity.id,
        image_src=image_base_url + entity.image_ref if entity.image_ref else None,
        title=entity.name,
        subtitle=", ".join(entity.cuisines) or None,
        location=f"Area: {entity.area_name}" if entity.area_name else None,
        rating=_format_rating(entity),
        delivery=entity.delivery_eta_text,
        cost=entity.cost_for_two_text,
    )
