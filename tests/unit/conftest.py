"""
Pytest configuration and shared fixtures for unit tests.

Provides stand-ins for Cloudflare SDK responses so tests never touch the
network.
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest

from cloudflare_tables.config import clear_settings_cache
from cloudflare_tables.tables import CustomHostnameTable, TableRegistry


class FakeModel(SimpleNamespace):
    """Attribute-access object with a pydantic-style model_dump()."""

    def model_dump(self, mode: str = "python", exclude_unset: bool = False) -> dict:
        return {
            key: value.model_dump(mode=mode, exclude_unset=exclude_unset)
            if isinstance(value, FakeModel)
            else value
            for key, value in vars(self).items()
        }


def make_hostname(
    hostname_id: str,
    hostname: str,
    status: str = "active",
    ssl: object = None,
    created_at: object = None,
) -> FakeModel:
    """Build a custom hostname item shaped like the SDK model."""
    return FakeModel(
        id=hostname_id,
        hostname=hostname,
        status=status,
        ssl=ssl,
        created_at=created_at,
    )


def make_page(items: list, page: int, total_pages: int, count: int | None = None):
    """Build a listing page shaped like SyncV4PagePaginationArray."""
    return SimpleNamespace(
        result=items,
        result_info=SimpleNamespace(
            page=page,
            per_page=50,
            count=len(items) if count is None else count,
            total_pages=total_pages,
            total_count=None,
        ),
    )


def make_status_error(
    status_code: int, message: str = "error"
) -> httpx.HTTPStatusError:
    """Build an httpx status error with the given response code."""
    request = httpx.Request(
        "GET", "https://api.cloudflare.com/client/v4/zones/z1/custom_hostnames"
    )
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(message, request=request, response=response)


@pytest.fixture
def created_at():
    """A fixed creation timestamp."""
    return datetime(2024, 1, 15, 12, 30, 45, tzinfo=timezone.utc)


@pytest.fixture
def client():
    """MagicMock standing in for cloudflare.Cloudflare."""
    return MagicMock(name="Cloudflare")


@pytest.fixture
def table():
    """A CustomHostnameTable instance."""
    return CustomHostnameTable()


@pytest.fixture
def isolated_registry():
    """
    Snapshot and restore the table registry around a test.

    Tests may clear or overwrite registrations freely.
    """
    saved = dict(TableRegistry._tables)
    yield TableRegistry
    TableRegistry._tables.clear()
    TableRegistry._tables.update(saved)


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Ensure cached settings never leak between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def hostname_factory():
    """Factory for SDK-shaped custom hostname items."""
    return make_hostname


@pytest.fixture
def page_factory():
    """Factory for SDK-shaped listing pages."""
    return make_page


@pytest.fixture
def status_error_factory():
    """Factory for httpx status errors."""
    return make_status_error


@pytest.fixture
def fake_model():
    """The FakeModel class, for building nested SDK-shaped values."""
    return FakeModel
