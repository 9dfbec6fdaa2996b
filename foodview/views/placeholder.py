from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, Field

from ..catalog.config import DEFAULT_CATALOG_CONFIG

PLACEHOLDER_COUNT = DEFAULT_CATALOG_CONFIG.placeholder_count


class PlaceholderUnit(BaseModel):
    key: int
    parts: list[str] = Field(default_factory=lambda: ["image", "text", "text-small"])


def iter_placeholders(count: int = PLACEHOLDER_COUNT) -> Iterator[PlaceholderUnit]:
    for index in range(count):
        yield PlaceholderUnit(key=index)


def render_placeholder() -> list[PlaceholderUnit]:
    """Return the loading skeleton: always 15 identical units keyed 0..14."""
    return list(iter_placeholders())
