from __future__ import annotations

from fastapi.testclient import TestClient

from foodview.app import app, create_app
from foodview.catalog.config import CatalogConfig
from foodview.catalog.errors import NetworkFailure
from foodview.tests.sample_data import sample_entities

CONFIG = CatalogConfig(image_base_url="https://img.example/")


def _factory(entities=None, error=None):
    def build(client, config):
        async def fetch():
            if error is not None:
                raise error
            return entities if entities is not None else sample_entities(20)

        return fetch

    return build


def test_health():
    client = TestClient(app)
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_listing_not_started_is_503():
    client = TestClient(create_app(_factory(), CONFIG))
    assert client.get("/listing").status_code == 503


def test_listing_loads_cards():
    with TestClient(create_app(_factory(), CONFIG)) as client:
        resp = client.get("/listing", params={"wait": True})
        assert resp.status_code == 200
        body = resp.json()
        assert body["header"]["nav_items"] == ["Home", "Contact", "Menu", "Order", "Cart"]
        assert body["body"]["kind"] == "cards"
        assert body["body"]["phase"] == "loaded"
        cards = body["body"]["cards"]
        assert len(cards) == 20
        assert cards[0]["key"] == "1000"
        assert cards[0]["image_src"] == "https://img.example/img0"


def test_search_then_top_rated():
    with TestClient(create_app(_factory(), CONFIG)) as client:
        client.get("/listing", params={"wait": True})

        resp = client.post("/listing/search", json={"text": "PIZZA"})
        assert resp.status_code == 200
        body = resp.json()["body"]
        assert body["phase"] == "filtered"
        assert body["search_text"] == "PIZZA"
        assert len(body["cards"]) == 5

        resp = client.post("/listing/top-rated")
        titles = [c["title"] for c in resp.json()["body"]["cards"]]
        assert titles == ["Pizza Hut", "La Pino'z Pizza", "Oven Story Pizza"]


def test_search_validation():
    with TestClient(create_app(_factory(), CONFIG)) as client:
        resp = client.post("/listing/search", json={})
        assert resp.status_code == 422


def test_fetch_failure_keeps_placeholder():
    app_ = create_app(_factory(error=NetworkFailure("offline")), CONFIG)
    with TestClient(app_) as client:
        body = client.get("/listing", params={"wait": True}).json()["body"]
        assert body["kind"] == "placeholder"
        assert body["phase"] == "failed"
        assert len(body["placeholders"]) == 15
        assert body["cards"] == []
        assert body["error"] == "offline"


def test_metadata():
    with TestClient(create_app(_factory(sample_entities(4)), CONFIG)) as client:
        client.get("/listing", params={"wait": True})
        resp = client.get("/metadata")
        assert resp.status_code == 200
        body = resp.json()
        assert body["count"] == 4
        assert body["areas"] == ["Clock Tower", "Rajpur Road"]


def test_repeated_searches_keep_host_history_bounded():
    app_ = create_app(_factory(), CONFIG)
    with TestClient(app_) as client:
        client.get("/listing", params={"wait": True})
        for _ in range(100):
            client.post("/listing/search", json={"text": "pizza"})
        host = app_.state.host
        assert host.refreshes >= 100
        assert len(host.history) <= host.history.maxlen
