"""
Cloudflare Custom Hostname table.

Exposes SSL for SaaS custom hostnames of a zone as rows for the host query
engine.

Field Mapping:
    Cloudflare Field     -> Column
    id                   -> id
    (query predicate)    -> zone_id
    hostname             -> name
    status / ssl.status  -> status (list / get)
    created_at           -> created_on
    ssl                  -> ssl (None when empty)

The API does not echo the zone back on the per-record endpoint, so zone_id
is always taken from the query predicate.
"""

import dataclasses
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

from cloudflare import Cloudflare

from ..cloudflare.client import get_cloudflare_client
from ..config.constants import (
    CUSTOM_HOSTNAME_TABLE,
    FIRST_PAGE,
    HOSTNAME_FILTER_PARAMS,
)
from ..config.settings import Settings
from ..utils.http_utils import is_not_found_error
from .base import Column, ColumnType, KeyColumns, QueryData, Table
from .registry import TableRegistry

logger = logging.getLogger(__name__)


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class CustomHostnameRecord:
    """
    A custom hostname mapped onto the table's columns.

    Attributes:
        id: API-assigned identifier (empty on creation-pending records)
        zone_id: Zone from the query predicate
        name: The custom hostname value
        status: Hostname status (list) or SSL status (get)
        created_on: Creation time (UTC), if reported
        ssl: SSL metadata passed through verbatim, None when empty
    """

    id: str
    zone_id: str
    name: str
    status: str
    created_on: Optional[datetime] = None
    ssl: Optional[Any] = None


@dataclass(frozen=True)
class CustomHostnameFilter:
    """
    Server-side filters for listing custom hostnames.

    Attributes:
        zone_id: Zone to list (required)
        name: Exact hostname to match
        status: Hostname status to match (e.g. 'active', 'pending')
    """

    zone_id: str
    name: Optional[str] = None
    status: Optional[str] = None

    def to_query_params(self) -> dict[str, str]:
        """Query parameters for the listing endpoint, only for supplied filters."""
        params = {}
        for attr, param in HOSTNAME_FILTER_PARAMS.items():
            value = getattr(self, attr)
            if value is not None:
                params[param] = value
        return params

    @classmethod
    def from_quals(cls, quals: QueryData) -> "CustomHostnameFilter":
        """Build a filter from the host's equality predicates."""
        return cls(
            zone_id=quals.get("zone_id", ""),
            name=quals.get("name"),
            status=quals.get("status"),
        )


# =============================================================================
# Mapping
# =============================================================================


def _field(item: Any, name: str) -> Any:
    """Read a field from an SDK model or a plain dict."""
    if item is None:
        return None
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def _to_json(value: Any) -> Any:
    """Convert SDK models to plain JSON-compatible values; empty becomes None."""
    if value is None:
        return None
    if hasattr(value, "model_dump"):
        value = value.model_dump(mode="json", exclude_unset=True)
    elif isinstance(value, dict):
        value = dict(value)
    elif isinstance(value, (list, tuple)):
        value = list(value)

    if isinstance(value, (dict, list)) and not value:
        return None
    return value


def _parse_created_on(value: Any) -> Optional[datetime]:
    """
    Parse the created_at field into a UTC-aware datetime.

    Naive datetimes are assumed to be UTC. Unparseable values give None.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    if isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logger.debug(f"Unparseable created_at value: {value!r}")
            return None
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt

    return None


def _to_record(item: Any, status_from_ssl: bool = False) -> CustomHostnameRecord:
    """
    Convert an API item to a record with an empty zone_id.

    Args:
        item: Custom hostname from the SDK (model or dict)
        status_from_ssl: Take status from ssl.status (get endpoint)
    """
    ssl = _field(item, "ssl")
    status = _field(item, "status")
    if status_from_ssl:
        status = _field(ssl, "status") or status

    return CustomHostnameRecord(
        id=_field(item, "id") or "",
        zone_id="",
        name=_field(item, "hostname") or "",
        status=str(status) if status is not None else "",
        created_on=_parse_created_on(_field(item, "created_at")),
        ssl=_to_json(ssl),
    )


def resolve_zone_id(
    record: CustomHostnameRecord, zone_id: str
) -> CustomHostnameRecord:
    """
    Return a copy of the record carrying the zone from the query predicate.

    Applied to every record produced by both list and get.
    """
    return dataclasses.replace(record, zone_id=zone_id)


# =============================================================================
# Core Functions
# =============================================================================


def _page_info(
    response: Any, requested_page: int, item_count: int
) -> tuple[int, Optional[int], int]:
    """Return (page, total_pages, count) from a listing response."""
    info = getattr(response, "result_info", None)

    page = _field(info, "page") or requested_page
    total_pages = _field(info, "total_pages")
    count = _field(info, "count")
    if count is None:
        count = item_count

    return page, total_pages, count


def list_custom_hostnames(
    client: Cloudflare,
    query_filter: CustomHostnameFilter,
) -> Iterator[CustomHostnameRecord]:
    """
    Stream custom hostnames of a zone, page by page.

    Each item is yielded as soon as its page arrives. Paging stops when the
    reported total page count is <= the current page, or when a page reports
    no results. A page without total_pages metadata is treated as the last.

    Args:
        client: Cloudflare client
        query_filter: Zone and server-side filters

    Yields:
        CustomHostnameRecord objects, in API order

    Raises:
        Exception: Any error from a page request, unchanged. Records from
            earlier pages have already been yielded.
    """
    params = query_filter.to_query_params()
    page_number = FIRST_PAGE

    while True:
        try:
            response = client.custom_hostnames.list(
                zone_id=query_filter.zone_id,
                page=page_number,
                extra_query=params,
            )
        except Exception as e:
            logger.error(
                f"Error listing custom hostnames for zone {query_filter.zone_id} "
                f"(page {page_number}): {e}"
            )
            raise

        items = list(getattr(response, "result", None) or [])
        page, total_pages, count = _page_info(response, page_number, len(items))
        logger.debug(
            f"Fetched {len(items)} custom hostnames for zone {query_filter.zone_id} "
            f"(page {page}/{total_pages}, count {count})"
        )

        for item in items:
            yield resolve_zone_id(_to_record(item), query_filter.zone_id)

        if total_pages is None or total_pages <= page or count == 0:
            break

        page_number += 1


def get_custom_hostname(
    client: Cloudflare,
    zone_id: str,
    custom_hostname_id: str,
) -> Optional[CustomHostnameRecord]:
    """
    Fetch one custom hostname by ID.

    Args:
        client: Cloudflare client
        zone_id: Zone the hostname belongs to
        custom_hostname_id: Custom hostname identifier

    Returns:
        CustomHostnameRecord, or None if the API reports 404

    Raises:
        Exception: Any other error from the request, unchanged
    """
    try:
        item = client.custom_hostnames.get(custom_hostname_id, zone_id=zone_id)
    except Exception as e:
        if is_not_found_error(e):
            logger.debug(
                f"Custom hostname {custom_hostname_id} not found in zone {zone_id}"
            )
            return None
        raise

    return resolve_zone_id(_to_record(item, status_from_ssl=True), zone_id)


# =============================================================================
# Table
# =============================================================================


@TableRegistry.register(CUSTOM_HOSTNAME_TABLE)
class CustomHostnameTable(Table):
    """
    Cloudflare Custom Hostname table.

    Example:
        table = CustomHostnameTable()
        quals = QueryData({"zone_id": "023e105f4ecef8ad9ca31a8372d0c353"})
        for row in table.list_rows(quals):
            print(row["name"], row["status"])
    """

    _COLUMNS = [
        Column("id", ColumnType.STRING, "ID of the custom hostname."),
        Column(
            "zone_id",
            ColumnType.STRING,
            "Zone where the custom hostname is defined.",
        ),
        Column("name", ColumnType.STRING, "Custom hostname value."),
        Column(
            "status",
            ColumnType.STRING,
            "Status of the custom hostname (eg. 'active').",
        ),
        Column(
            "created_on",
            ColumnType.TIMESTAMP,
            "When the custom hostname was created.",
        ),
        Column("ssl", ColumnType.JSON, "SSL meta JSON."),
    ]

    @property
    def name(self) -> str:
        return CUSTOM_HOSTNAME_TABLE

    @property
    def description(self) -> str:
        return "Cloudflare Custom Hostname."

    @property
    def columns(self) -> list[Column]:
        return list(self._COLUMNS)

    @property
    def list_key_columns(self) -> KeyColumns:
        return KeyColumns(("zone_id",))

    @property
    def get_key_columns(self) -> KeyColumns:
        return KeyColumns(("zone_id", "id"))

    def list_rows(
        self,
        quals: QueryData,
        client: Optional[Cloudflare] = None,
        settings: Optional[Settings] = None,
    ) -> Iterator[dict[str, Any]]:
        self.check_key_columns(self.list_key_columns, quals)

        if client is None:
            client = get_cloudflare_client(settings)

        query_filter = CustomHostnameFilter.from_quals(quals)
        for record in list_custom_hostnames(client, query_filter):
            yield self.to_row(record)

    def get_row(
        self,
        quals: QueryData,
        client: Optional[Cloudflare] = None,
        settings: Optional[Settings] = None,
    ) -> Optional[dict[str, Any]]:
        self.check_key_columns(self.get_key_columns, quals)

        if client is None:
            client = get_cloudflare_client(settings)

        record = get_custom_hostname(client, quals.get("zone_id"), quals.get("id"))
        if record is None:
            return None
        return self.to_row(record)
