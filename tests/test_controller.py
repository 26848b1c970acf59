from __future__ import annotations

from urllib.parse import parse_qs, urlparse

import json

import requests
import responses

from livestock_console.auth_store import StaticTokenAuth
from livestock_console.controller import RemoteCollectionController
from livestock_console.entities import OUTLETS, SUPPLIERS
from livestock_console.http_client import HttpClient

from conftest import BASE_URL, SUPPLIER_ROWS, list_body

SUPPLIER_DATA = f"{BASE_URL}/api/master/supplier/data"


def _query(call_index: int) -> dict[str, list[str]]:
    return parse_qs(urlparse(responses.calls[call_index].request.url).query)


@responses.activate
def test_fetch_replaces_mirror_and_pagination(http: HttpClient, auth: StaticTokenAuth) -> None:
    responses.add(responses.GET, SUPPLIER_DATA, json=list_body(SUPPLIER_ROWS, total=25), status=200)
    controller = RemoteCollectionController(SUPPLIERS, http, auth)

    assert controller.fetch() is True

    assert controller.mirror.source == "remote"
    assert controller.mirror.pubids == ["S1", "S2", "S3"]
    assert controller.pagination.total_items == 25
    assert controller.pagination.total_pages == 3
    assert controller.loading is False
    assert controller.error is None
    query = _query(0)
    assert query["start"] == ["0"]
    assert query["length"] == ["10"]
    assert query["draw"] == ["1"]
    assert responses.calls[0].request.headers["Authorization"] == "Bearer token-123"


@responses.activate
def test_fetch_is_idempotent(http: HttpClient, auth: StaticTokenAuth) -> None:
    responses.add(responses.GET, SUPPLIER_DATA, json=list_body(SUPPLIER_ROWS), status=200)
    controller = RemoteCollectionController(SUPPLIERS, http, auth)
    controller.fetch()
    first = [record.model_dump() for record in controller.mirror]
    controller.fetch()
    assert [record.model_dump() for record in controller.mirror] == first
    assert controller.mirror.version == 2
    assert controller.pagination.total_items == 3


@responses.activate
def test_unauthorized_falls_back_to_catalog(http: HttpClient, auth: StaticTokenAuth) -> None:
    responses.add(responses.GET, SUPPLIER_DATA, json={"message": "token expired"}, status=401)
    controller = RemoteCollectionController(SUPPLIERS, http, auth)

    assert controller.fetch() is False

    assert controller.is_fallback
    assert len(controller.mirror) == 5
    assert controller.loading is False
    assert controller.error is not None
    assert controller.error.startswith("API Error: Unauthorized")
    assert "token expired" in controller.error
    assert controller.last_exception is not None
    assert controller.last_exception.status_code == 401


@responses.activate
def test_network_failure_falls_back(http: HttpClient, auth: StaticTokenAuth) -> None:
    responses.add(responses.GET, SUPPLIER_DATA, body=requests.ConnectionError("refused"))
    controller = RemoteCollectionController(SUPPLIERS, http, auth)
    controller.fetch()
    assert controller.is_fallback
    assert "Network error" in (controller.error or "")


@responses.activate
def test_malformed_response_falls_back(http: HttpClient, auth: StaticTokenAuth) -> None:
    responses.add(responses.GET, SUPPLIER_DATA, json={"rows": []}, status=200)
    controller = RemoteCollectionController(SUPPLIERS, http, auth)
    controller.fetch()
    assert controller.is_fallback
    assert "Unexpected list response format" in (controller.error or "")


@responses.activate
def test_missing_token_never_hits_the_network(http: HttpClient) -> None:
    controller = RemoteCollectionController(SUPPLIERS, http, StaticTokenAuth(None))
    controller.fetch()
    assert len(responses.calls) == 0
    assert controller.is_fallback
    assert "Authentication token not found" in (controller.error or "")


@responses.activate
def test_stale_response_is_discarded(http: HttpClient, auth: StaticTokenAuth) -> None:
    controller = RemoteCollectionController(SUPPLIERS, http, auth)
    calls = {"count": 0}

    def callback(request):
        calls["count"] += 1
        if calls["count"] == 1:
            # A newer fetch starts and finishes while the first is in flight.
            controller.fetch(search_term="vet")
            return (200, {}, json.dumps(list_body(SUPPLIER_ROWS, total=30)))
        return (200, {}, json.dumps(list_body([SUPPLIER_ROWS[1]], total=1)))

    responses.add_callback(responses.GET, SUPPLIER_DATA, callback=callback)

    assert controller.fetch() is False

    assert controller.mirror.pubids == ["S2"]
    assert controller.pagination.total_items == 1
    assert controller.request.search_term == "vet"
    assert controller.loading is False


@responses.activate
def test_page_navigation_is_gated(http: HttpClient, auth: StaticTokenAuth) -> None:
    responses.add(responses.GET, SUPPLIER_DATA, json=list_body(SUPPLIER_ROWS, total=25), status=200)
    controller = RemoteCollectionController(SUPPLIERS, http, auth)
    controller.fetch()

    assert controller.go_to_page(0) is False
    assert controller.go_to_page(1) is False
    assert controller.go_to_page(4) is False
    assert controller.previous_page() is False
    assert len(responses.calls) == 1

    assert controller.next_page() is True
    assert _query(1)["start"] == ["10"]
    assert controller.pagination.current_page == 2

    controller.loading = True
    assert controller.go_to_page(3) is False
    assert len(responses.calls) == 2


@responses.activate
def test_set_per_page_resets_to_first_page(http: HttpClient, auth: StaticTokenAuth) -> None:
    responses.add(responses.GET, SUPPLIER_DATA, json=list_body(SUPPLIER_ROWS, total=25), status=200)
    controller = RemoteCollectionController(SUPPLIERS, http, auth)
    controller.fetch(page=2)
    assert controller.set_per_page(10) is False

    assert controller.set_per_page(6) is True

    query = _query(1)
    assert query["start"] == ["0"]
    assert query["length"] == ["6"]
    assert controller.pagination.total_pages == 5
    assert controller.page_window() == [1, 2, 3, 4, 5]


@responses.activate
def test_client_filters_do_not_refetch(http: HttpClient, auth: StaticTokenAuth) -> None:
    responses.add(responses.GET, SUPPLIER_DATA, json=list_body(SUPPLIER_ROWS), status=200)
    controller = RemoteCollectionController(SUPPLIERS, http, auth)
    controller.fetch()

    controller.set_search_term("FEED")
    assert [record.pubid for record in controller.records] == ["S1"]
    controller.set_search_term("")
    controller.set_status_filter("inactive")
    assert [record.pubid for record in controller.records] == ["S2"]

    stats = controller.stats
    assert (stats.total, stats.active, stats.inactive) == (3, 2, 1)
    assert len(responses.calls) == 1


@responses.activate
def test_shared_table_sends_discriminator(http: HttpClient, auth: StaticTokenAuth) -> None:
    responses.add(
        responses.GET,
        f"{BASE_URL}/api/master/pelanggan/data",
        json=list_body([{"pubid": "O1", "name": "Outlet", "type": "Retail", "status": 1}]),
        status=200,
    )
    controller = RemoteCollectionController(OUTLETS, http, auth)
    controller.fetch()
    assert _query(0)["kategori"] == ["outlet"]
    assert controller.categories == ["Retail"]


@responses.activate
def test_check_connection(http: HttpClient, auth: StaticTokenAuth) -> None:
    responses.add(responses.HEAD, SUPPLIER_DATA, status=200)
    controller = RemoteCollectionController(SUPPLIERS, http, auth)
    assert controller.check_connection().success is True

    responses.replace(responses.HEAD, SUPPLIER_DATA, status=403)
    result = controller.check_connection()
    assert result.success is False
    assert result.message.startswith("API connection failed: Forbidden")


def test_for_entity_uses_config(http: HttpClient, auth: StaticTokenAuth) -> None:
    controller = RemoteCollectionController.for_entity("outlets", http, auth)
    assert controller.adapter is OUTLETS
    assert controller.request.per_page == 10
    assert controller.page_window_size == 5


@responses.activate
def test_unusual_status_values_keep_the_remote_page(http: HttpClient, auth: StaticTokenAuth) -> None:
    rows = [
        {"pubid": "S1", "name": "Feed Co", "description": "Feed", "order_no": 1, "status": 1},
        {"pubid": "S2", "name": "Vet Supply", "description": "Medicine", "order_no": 2, "status": "archived"},
        {"pubid": "S3", "name": "Farm Tools", "description": "Equipment", "order_no": 3, "status": None},
    ]
    responses.add(responses.GET, SUPPLIER_DATA, json=list_body(rows), status=200)
    controller = RemoteCollectionController(SUPPLIERS, http, auth)

    assert controller.fetch() is True

    assert controller.mirror.source == "remote"
    assert controller.mirror.pubids == ["S1", "S2", "S3"]
    controller.set_status_filter("active")
    assert [record.pubid for record in controller.records] == ["S1"]
    controller.set_status_filter("inactive")
    assert controller.records == []
    assert controller.stats.active == 1
    assert controller.stats.inactive == 0
