from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import httpx

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .errors import NetworkFailure, ParseFailure, UnexpectedShape
from .models import CatalogEntity

logger = logging.getLogger(__name__)


def _descend(payload: Any, path: Sequence[str | int]) -> Any:
    node = payload
    for depth, segment in enumerate(path):
        if isinstance(segment, int):
            if not isinstance(node, list) or not -len(node) <= segment < len(node):
                raise UnexpectedShape(segment, depth)
            node = node[segment]
        else:
            if not isinstance(node, Mapping) or segment not in node:
                raise UnexpectedShape(segment, depth)
            node = node[segment]
        if node is None:
            raise UnexpectedShape(segment, depth)
    return node


def extract_entities(
    payload: Any,
    path: Sequence[str | int] = DEFAULT_CATALOG_CONFIG.entities_path,
) -> list[CatalogEntity]:
    """
    Pull the restaurant list out of a listing response.

    Raises ``UnexpectedShape`` when any path segment is missing or the
    leaf is not a list. Elements without an ``info`` mapping or an id are
    skipped; a repeated id keeps its first occurrence.
    """
    leaf = _descend(payload, path)
    if not isinstance(leaf, list):
        raise UnexpectedShape(path[-1] if path else "<root>", len(path))

    entities: list[CatalogEntity] = []
    seen: set[str] = set()
    for position, element in enumerate(leaf):
        info = element.get("info") if isinstance(element, Mapping) else None
        if not isinstance(info, Mapping):
            logger.warning("Skipping listing element %d without info block", position)
            continue
        entity = CatalogEntity.from_info(info)
        if entity.id is None:
            logger.warning("Skipping listing element %d without id", position)
            continue
        if entity.id in seen:
            logger.warning("Skipping duplicate restaurant id %s", entity.id)
            continue
        seen.add(entity.id)
        entities.append(entity)
    return entities


async def fetch_catalog(
    client: httpx.AsyncClient,
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> list[CatalogEntity]:
    """
    Issue the listing request once and return the parsed entities.

    Raises ``NetworkFailure``, ``ParseFailure`` or ``UnexpectedShape``.
    Nothing is retried here.
    """
    logger.info("Fetching catalog from %s", config.endpoint)
    try:
        response = await client.get(
            config.endpoint,
            params=config.query_params,
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout,
        )
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise NetworkFailure(str(exc) or type(exc).__name__) from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise ParseFailure(f"response body is not JSON: {exc}") from exc

    entities = extract_entities(payload, config.entities_path)
    logger.info("Fetched %d restaurants", len(entities))
    return entities


class CatalogFetcher:
    """Zero-argument async fetch bound to one client and config."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
    ) -> None:
        self._client = client
        self._config = config

    async def __call__(self) -> list[CatalogEntity]:
        return await fetch_catalog(self._client, self._config)
