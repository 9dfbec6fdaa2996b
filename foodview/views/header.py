from __future__ import annotations

from pydantic import BaseModel, Field

from ..catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig

NAV_ITEMS = ["Home", "Contact", "Menu", "Order", "Cart"]


class HeaderView(BaseModel):
    logo_url: str
    nav_items: list[str] = Field(default_factory=lambda: list(NAV_ITEMS))
    search_placeholder: str = "Enter the Item to Search..."


def render_header(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> HeaderView:
    return HeaderView(logo_url=config.logo_url)
