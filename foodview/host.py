from __future__ import annotations

import logging
from collections import deque
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class ViewSource(Protocol):
    def render(self) -> Any: ...


class ViewHost(Protocol):
    """Attachment point a listing is mounted on once."""

    def mount(self, source: ViewSource) -> None: ...

    def invalidate(self) -> None: ...


class MemoryHost:
    """In-process host: renders on demand and keeps the most recent refreshes."""

    def __init__(self, history_size: int = 16) -> None:
        self._source: ViewSource | None = None
        self.history: deque[Any] = deque(maxlen=history_size)
        self.refreshes = 0

    @property
    def mounted(self) -> bool:
        return self._source is not None

    def mount(self, source: ViewSource) -> None:
        if self._source is not None:
            raise RuntimeError("a view is already mounted on this host")
        self._source = source
        self.invalidate()

    def invalidate(self) -> None:
        if self._source is None:
            return
        self.history.append(self._source.render())
        self.refreshes += 1
        logger.debug("Host refreshed (%d renders)", self.refreshes)

    def current(self) -> Any:
        if self._source is None:
            raise RuntimeError("nothing is mounted on this host")
        return self._source.render()
