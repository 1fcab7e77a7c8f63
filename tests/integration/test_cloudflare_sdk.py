"""
Integration tests against the real cloudflare SDK.

The SDK runs unmodified; only its HTTP transport is replaced by an
httpx.MockTransport serving canned v4 API responses. This exercises the
SDK's own page and record models (result_info extras, SSL sub-models).
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import cloudflare
import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from cloudflare_tables.tables import (
    CustomHostnameFilter,
    CustomHostnameTable,
    QueryData,
    get_custom_hostname,
    list_custom_hostnames,
)

BASE_URL = "https://api.cloudflare.com/client/v4"
LIST_PATH = "/client/v4/zones/z1/custom_hostnames"

CREATED_AT = "2024-01-15T12:30:45Z"

PAGES = {
    1: {
        "result": [
            {
                "id": "h1",
                "hostname": "a.example.com",
                "status": "active",
                "ssl": {"status": "active", "method": "http", "type": "dv"},
                "created_at": CREATED_AT,
            },
            {
                "id": "h2",
                "hostname": "b.example.com",
                "status": "pending",
                "ssl": {"status": "pending_validation", "method": "txt"},
                "created_at": CREATED_AT,
            },
        ],
        "result_info": {
            "page": 1,
            "per_page": 2,
            "count": 2,
            "total_count": 3,
            "total_pages": 2,
        },
    },
    2: {
        "result": [
            {
                "id": "h3",
                "hostname": "c.example.com",
                "status": "active",
                "ssl": {},
            },
        ],
        "result_info": {
            "page": 2,
            "per_page": 2,
            "count": 1,
            "total_count": 3,
            "total_pages": 2,
        },
    },
}

RECORDS = {
    "abc": {
        "id": "abc",
        "hostname": "foo.example.com",
        "status": "pending",
        "ssl": {"status": "active", "method": "http"},
        "created_at": CREATED_AT,
    },
}

ERRORS = {
    "missing": (404, 1436, "Custom hostname not found"),
    "boom": (403, 10000, "Authentication error"),
}


def _envelope(result, **extra) -> dict:
    return {"success": True, "errors": [], "messages": [], "result": result, **extra}


def _handle(request: httpx.Request) -> httpx.Response:
    """Serve the custom hostname endpoints for zone z1."""
    path = request.url.path

    if path == LIST_PATH:
        page = PAGES[int(request.url.params["page"])]
        return httpx.Response(
            200, json=_envelope(page["result"], result_info=page["result_info"])
        )

    hostname_id = path[len(LIST_PATH) + 1 :]
    if hostname_id in RECORDS:
        return httpx.Response(200, json=_envelope(RECORDS[hostname_id]))

    status_code, code, message = ERRORS.get(hostname_id, (404, 1436, "not found"))
    return httpx.Response(
        status_code,
        json={
            "success": False,
            "errors": [{"code": code, "message": message}],
            "messages": [],
            "result": None,
        },
    )


@pytest.fixture
def requests_seen():
    """Requests received by the mock transport, in order."""
    return []


@pytest.fixture
def sdk_client(requests_seen):
    """A real cloudflare.Cloudflare client backed by a mock transport."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return _handle(request)

    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    client = cloudflare.Cloudflare(
        api_token="test-token",
        base_url=BASE_URL,
        max_retries=0,
        http_client=http_client,
    )
    yield client
    http_client.close()


class TestListWithSDK:
    """Listing through the SDK's page models."""

    def test_two_pages_then_stop(self, sdk_client, requests_seen):
        """2 + 1 items give 3 records in order from exactly 2 requests."""
        records = list(list_custom_hostnames(sdk_client, CustomHostnameFilter("z1")))

        assert [r.id for r in records] == ["h1", "h2", "h3"]
        assert {r.zone_id for r in records} == {"z1"}
        assert [dict(r.url.params) for r in requests_seen] == [
            {"page": "1"},
            {"page": "2"},
        ]

    def test_filters_sent_verbatim(self, sdk_client, requests_seen):
        """name and status reach the API as hostname and status params."""
        query_filter = CustomHostnameFilter(
            "z1", name="x.example.com", status="active"
        )

        list(list_custom_hostnames(sdk_client, query_filter))

        assert len(requests_seen) == 2
        for page, request in enumerate(requests_seen, start=1):
            assert request.method == "GET"
            assert request.url.path == LIST_PATH
            assert dict(request.url.params) == {
                "page": str(page),
                "hostname": "x.example.com",
                "status": "active",
            }

    def test_ssl_models_dumped_and_empty_normalized(self, sdk_client):
        """SSL sub-models become plain dicts; an empty one becomes None."""
        records = list(list_custom_hostnames(sdk_client, CustomHostnameFilter("z1")))

        assert records[0].ssl == {"status": "active", "method": "http", "type": "dv"}
        assert records[1].ssl == {"status": "pending_validation", "method": "txt"}
        assert records[2].ssl is None

    def test_list_status_and_created_on(self, sdk_client):
        records = list(list_custom_hostnames(sdk_client, CustomHostnameFilter("z1")))

        assert [r.status for r in records] == ["active", "pending", "active"]
        assert records[0].created_on == datetime(
            2024, 1, 15, 12, 30, 45, tzinfo=timezone.utc
        )
        assert records[2].created_on is None

    def test_table_rows(self, sdk_client):
        """The table streams column-ordered rows from SDK pages."""
        table = CustomHostnameTable()

        rows = list(table.list_rows(QueryData({"zone_id": "z1"}), client=sdk_client))

        assert len(rows) == 3
        assert all(list(row) == table.column_names for row in rows)
        assert {row["zone_id"] for row in rows} == {"z1"}


class TestGetWithSDK:
    """Point lookups through the SDK's record model and error types."""

    def test_get_maps_record(self, sdk_client):
        record = get_custom_hostname(sdk_client, "z1", "abc")

        assert record.id == "abc"
        assert record.zone_id == "z1"
        assert record.name == "foo.example.com"
        assert record.status == "active"
        assert record.created_on == datetime(
            2024, 1, 15, 12, 30, 45, tzinfo=timezone.utc
        )
        assert record.ssl == {"status": "active", "method": "http"}

    def test_not_found_returns_none(self, sdk_client, requests_seen):
        assert get_custom_hostname(sdk_client, "z1", "missing") is None
        # No retry on the 404
        assert len(requests_seen) == 1

    def test_forbidden_propagates(self, sdk_client, requests_seen):
        with pytest.raises(cloudflare.PermissionDeniedError):
            get_custom_hostname(sdk_client, "z1", "boom")

        assert len(requests_seen) == 1

    def test_table_get_row_not_found(self, sdk_client):
        table = CustomHostnameTable()

        row = table.get_row(
            QueryData({"zone_id": "z1", "id": "missing"}), client=sdk_client
        )

        assert row is None
