from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Awaitable, Callable, Sequence

from ..catalog.config import DEFAULT_CATALOG_CONFIG
from ..catalog.errors import FetchError
from ..catalog.models import CatalogEntity
from ..host import ViewHost
from ..views.card import CardView, render_card
from ..views.listing import ListingView, ViewKind
from ..views.placeholder import render_placeholder
from .filters import filter_by_name, filter_top_rated
from .state import ListingPhase, ListingState

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[Sequence[CatalogEntity]]]
CardRenderer = Callable[[CatalogEntity], CardView]

_FILTERABLE = (ListingPhase.loaded, ListingPhase.filtered)


class ListingController:
    """
    Owns the listing state and drives fetch -> placeholder -> filter -> cards.

    The fetch runs once, when ``start`` is first called. Filters are
    synchronous recomputations over the state already held.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        card_renderer: CardRenderer = render_card,
        rating_threshold: float = DEFAULT_CATALOG_CONFIG.rating_threshold,
    ) -> None:
        self._fetcher = fetcher
        self._card_renderer = card_renderer
        self._rating_threshold = rating_threshold
        self._host: ViewHost | None = None
        self._task: asyncio.Task[None] | None = None
        self.state = ListingState()
        self.phase = ListingPhase.idle
        self.error: FetchError | None = None

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self, host: ViewHost) -> asyncio.Task[None]:
        """
        Mount on ``host`` and schedule the catalog fetch without awaiting it.

        Only the first call has any effect; later calls return the same task.
        Must be called from a running event loop.
        """
        if self._task is not None:
            return self._task
        loop = asyncio.get_running_loop()
        self.phase = ListingPhase.loading
        try:
            host.mount(self)
        except Exception:
            self.phase = ListingPhase.idle
            raise
        self._host = host
        self._task = loop.create_task(self._load())
        return self._task

    async def _load(self) -> None:
        try:
            entities = list(await self._fetcher())
        except FetchError as exc:
            self.error = exc
            self.phase = ListingPhase.failed
            logger.warning("Catalog fetch failed: %s", exc, exc_info=True)
        else:
            self.state.raw_entities = entities
            self.state.visible_entities = list(entities)
            self.phase = ListingPhase.loaded
            logger.info("Listing loaded with %d restaurants", len(entities))
        self._refresh()

    async def wait_loaded(self) -> None:
        """Wait for the initial fetch to settle (success, failure or cancel)."""
        if self._task is None or self._task.cancelled():
            return
        with contextlib.suppress(asyncio.CancelledError):
            await self._task

    async def close(self) -> None:
        """Cancel a fetch still in flight."""
        if self._task is None or self._task.done():
            return
        logger.info("Cancelling in-flight catalog fetch")
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task

    def _refresh(self) -> None:
        if self._host is not None:
            self._host.invalidate()

    # ── User actions ─────────────────────────────────────────────────────

    def set_search_text(self, text: str) -> None:
        self.state.search_text = text

    def apply_name_filter(self, text: str | None = None) -> list[CatalogEntity]:
        """Derive the visible list from the raw list by name substring."""
        if text is not None:
            self.set_search_text(text)
        self.state.visible_entities = filter_by_name(
            self.state.raw_entities, self.state.search_text
        )
        self._mark_filtered()
        return self.state.visible_entities

    def apply_top_rated_filter(self) -> list[CatalogEntity]:
        """
        Narrow the visible list to top-rated restaurants and rebase on it.

        The result replaces the raw list too, so restaurants dropped here
        cannot come back through a later name filter.
        """
        top = filter_top_rated(self.state.visible_entities, self._rating_threshold)
        self.state.raw_entities = top
        self.state.visible_entities = list(top)
        self._mark_filtered()
        return self.state.visible_entities

    def _mark_filtered(self) -> None:
        if self.phase in _FILTERABLE:
            self.phase = ListingPhase.filtered
        self._refresh()

    # ── Rendering ────────────────────────────────────────────────────────

    def render(self) -> ListingView:
        error = str(self.error) if self.error is not None else None
        if not self.state.raw_entities:
            return ListingView(
                kind=ViewKind.placeholder,
                phase=self.phase,
                search_text=self.state.search_text,
                placeholders=render_placeholder(),
                error=error,
            )
        return ListingView(
            kind=ViewKind.cards,
            phase=self.phase,
            search_text=self.state.search_text,
            cards=[self._card_renderer(e) for e in self.state.visible_entities],
            error=error,
        )
