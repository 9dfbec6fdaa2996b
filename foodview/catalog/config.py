from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

ENTITIES_PATH: tuple[str | int, ...] = (
    "data",
    "cards",
    4,
    "card",
    "card",
    "gridElements",
    "infoWithStyle",
    "restaurants",
)


@dataclass(frozen=True)
class CatalogConfig:
    """
    Configuration for the catalog listing request and card rendering.
    """

    endpoint: str = os.getenv(
        "FOODVIEW_ENDPOINT", "https://www.swiggy.com/dapi/restaurants/list/v5"
    )
    latitude: float = float(os.getenv("FOODVIEW_LAT", "30.05605"))
    longitude: float = float(os.getenv("FOODVIEW_LNG", "78.2367565"))
    seo_homepage_enabled: bool = True
    page_type: str = "DESKTOP_WEB_LISTING"
    timeout: float = float(os.getenv("FOODVIEW_TIMEOUT", "10.0"))
    user_agent: str = "Mozilla/5.0 (X11; Linux x86_64) foodview/1.0"
    image_base_url: str = (
        "https://media-assets.swiggy.com/swiggy/image/upload/"
        "fl_lossy,f_auto,q_auto,w_660/"
    )
    logo_url: str = (
        "https://marketplace.canva.com/EAFowsrK6x8/1/0/1600w/"
        "canva-red-and-yellow-catering-flat-illustrative-food-place-logo-rYbQJ_qtaz8.jpg"
    )
    rating_threshold: float = 4.0
    placeholder_count: int = 15
    entities_path: tuple[str | int, ...] = ENTITIES_PATH

    @property
    def query_params(self) -> dict[str, str]:
        return {
            "lat": str(self.latitude),
            "lng": str(self.longitude),
            "is-seo-homepage-enabled": "true" if self.seo_homepage_enabled else "false",
            "page_type": self.page_type,
        }


DEFAULT_CATALOG_CONFIG = CatalogConfig()
