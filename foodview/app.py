from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

import httpx
from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from .catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .catalog.fetcher import CatalogFetcher
from .host import MemoryHost
from .listing.controller import Fetcher, ListingController
from .listing.filters import summarize
from .views.card import render_card
from .views.header import render_header
from .views.listing import PageView

FetcherFactory = Callable[[httpx.AsyncClient, CatalogConfig], Fetcher]


class SearchRequest(BaseModel):
    text: str


def create_app(
    fetcher_factory: FetcherFactory = CatalogFetcher,
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with httpx.AsyncClient(timeout=config.timeout) as client:
            controller = ListingController(
                fetcher_factory(client, config),
                card_renderer=lambda entity: render_card(entity, config.image_base_url),
                rating_threshold=config.rating_threshold,
            )
            host = MemoryHost()
            controller.start(host)
            app.state.controller = controller
            app.state.host = host
            try:
                yield
            finally:
                await controller.close()

    app = FastAPI(title="Restaurant Listing API", version="1.0.0", lifespan=lifespan)

    def _controller(request: Request) -> ListingController:
        controller = getattr(request.app.state, "controller", None)
        if controller is None:
            raise HTTPException(status_code=503, detail="Listing not started")
        return controller

    def _page(request: Request) -> PageView:
        return PageView(header=render_header(config), body=request.app.state.host.current())

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/metadata")
    async def metadata(request: Request) -> dict:
        return summarize(_controller(request).state.raw_entities)

    # ── Listing endpoints ────────────────────────────────────────────────

    @app.get("/listing", response_model=PageView)
    async def listing(request: Request, wait: bool = False) -> PageView:
        controller = _controller(request)
        if wait:
            await controller.wait_loaded()
        return _page(request)

    @app.post("/listing/search", response_model=PageView)
    async def search(body: SearchRequest, request: Request) -> PageView:
        _controller(request).apply_name_filter(body.text)
        return _page(request)

    @app.post("/listing/top-rated", response_model=PageView)
    async def top_rated(request: Request) -> PageView:
        _controller(request).apply_top_rated_filter()
        return _page(request)

    return app


app = create_app()
