import asyncio

import httpx
import pytest

from foodview.catalog.config import CatalogConfig
from foodview.catalog.errors import NetworkFailure, ParseFailure, UnexpectedShape
from foodview.catalog.fetcher import CatalogFetcher, extract_entities, fetch_catalog
from foodview.tests.sample_data import make_info, make_payload, sample_payload

CONFIG = CatalogConfig(endpoint="https://catalog.example/list", timeout=2.5)


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _fetch(handler):
    async def run():
        async with _client(handler) as client:
            return await fetch_catalog(client, CONFIG)

    return asyncio.run(run())


def test_fetch_returns_entities_in_order():
    entities = _fetch(lambda request: httpx.Response(200, json=sample_payload(20)))
    assert len(entities) == 20
    assert [e.id for e in entities] == [str(1000 + i) for i in range(20)]


def test_fetch_sends_fixed_query_params():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=sample_payload(1))

    _fetch(handler)
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "GET"
    assert request.url.host == "catalog.example"
    assert request.url.params["lat"] == str(CONFIG.latitude)
    assert request.url.params["lng"] == str(CONFIG.longitude)
    assert request.url.params["is-seo-homepage-enabled"] == "true"
    assert request.url.params["page_type"] == "DESKTOP_WEB_LISTING"
    assert request.extensions["timeout"]["read"] == 2.5


def test_fetch_network_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkFailure):
        _fetch(handler)


def test_fetch_timeout_is_network_failure():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(NetworkFailure):
        _fetch(handler)


def test_fetch_error_status_is_network_failure():
    with pytest.raises(NetworkFailure):
        _fetch(lambda request: httpx.Response(503, text="unavailable"))


def test_fetch_parse_failure():
    with pytest.raises(ParseFailure):
        _fetch(lambda request: httpx.Response(200, text="<html>not json</html>"))


def test_fetch_missing_path_is_unexpected_shape():
    with pytest.raises(UnexpectedShape):
        _fetch(lambda request: httpx.Response(200, json={"data": {"cards": []}}))


def test_catalog_fetcher_is_zero_arg_callable():
    async def run():
        async with _client(lambda r: httpx.Response(200, json=sample_payload(3))) as client:
            return await CatalogFetcher(client, CONFIG)()

    assert len(asyncio.run(run())) == 3


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"data": None},
        {"data": {"cards": "nope"}},
        {"data": {"cards": [{}, {}, {}, {}]}},
        {"data": {"cards": [{}, {}, {}, {}, {"card": {"card": {}}}]}},
        make_payload(None),
        [],
    ],
)
def test_extract_unresolvable_paths(payload):
    with pytest.raises(UnexpectedShape):
        extract_entities(payload)


def test_extract_leaf_must_be_a_list():
    payload = make_payload([])
    payload["data"]["cards"][4]["card"]["card"]["gridElements"]["infoWithStyle"]["restaurants"] = {"a": 1}
    with pytest.raises(UnexpectedShape):
        extract_entities(payload)


def test_extract_empty_list_is_valid():
    assert extract_entities(make_payload([])) == []


def test_extract_unexpected_shape_reports_segment():
    with pytest.raises(UnexpectedShape) as info:
        extract_entities({"data": {"cards": [{}, {}]}})
    assert info.value.segment == 4
    assert info.value.depth == 2


def test_extract_skips_bad_elements_and_duplicates():
    payload = make_payload([
        {"info": make_info(0)},
        {"info": make_info(0, name="Duplicate")},
        {"info": make_info(1, id=None)},
        {"noinfo": True},
        "garbage",
        {"info": make_info(2)},
    ])
    entities = extract_entities(payload)
    assert [e.id for e in entities] == ["1000", "1002"]
    assert entities[0].name == "Pizza Hut"


def test_fetch_huge_rating_degrades():
    payload = make_payload([{"info": make_info(0, avgRating=10**400)}])
    entities = _fetch(lambda request: httpx.Response(200, json=payload))
    assert len(entities) == 1
    assert entities[0].avg_rating is None
