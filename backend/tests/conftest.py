"""
Geologis Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.
Who:   Used by all test files in the tests/ directory.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── caracas_record / valencia_record: Raw Maersk location records
    ├── stream_body: Two records concatenated as application/stream+json
    ├── make_provider: Factory for FakeCityProvider with a canned answer
    ├── fake_provider: In-memory CityLookupProvider (no network)
    └── test_client: HTTPX AsyncClient for API endpoint testing
"""

import json
import os
from typing import List, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any geologis imports
os.environ["API_BEARER_TOKEN"] = ""
os.environ["API_PUBLIC_KEY"] = ""
os.environ["MAERSK_LOCATIONS_URL"] = "https://locations.test/"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

from geologis.services.provider_base import CityLookupProvider, UpstreamResponse  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Test Doubles
# ══════════════════════════════════════════════════════════════════════════

class FakeCityProvider(CityLookupProvider):
    """
    CityLookupProvider answering every search with one canned response.

    Records each call as (name, page_size, country_code) in `calls`.
    """

    def __init__(self, response: Optional[UpstreamResponse] = None, reachable: bool = True):
        self.response = response or UpstreamResponse(200, "application/stream+json", "")
        self.reachable = reachable
        self.calls: List[tuple] = []

    async def search_cities(self, name, page_size, country_code=None):
        self.calls.append((name, page_size, country_code))
        return self.response

    async def health_check(self) -> bool:
        return self.reachable


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def caracas_record():
    """A complete Maersk location record for Caracas, Venezuela."""
    return {
        "countryCode": "VE",
        "countryName": "Venezuela",
        "cityName": "Caracas",
        "regionCode": "DF",
        "regionName": "Distrito Federal",
        "timezoneId": "America/Caracas",
        "maerskGeoLocationId": "1JUKSJ0EBH8ZB",
        "countryGeoId": "3P2ZPMKNMQ0ZB",
        "brands": ["MAEU", "SEAU"],
        "brandNames": ["Maersk Line", "Sealand"],
        "maerskRkstCode": "VECCS",
        "maerskRktsCode": "VECCS",
    }


@pytest.fixture
def valencia_record():
    """A sparse record: no region, no brands."""
    return {
        "countryCode": "VE",
        "countryName": "Venezuela",
        "cityName": "Valencia",
        "timezoneId": "America/Caracas",
        "maerskGeoLocationId": "2KFYXN5BQR1CA",
        "maerskRkstCode": "VEVLN",
    }


@pytest.fixture
def stream_body(caracas_record, valencia_record):
    """Both records as the upstream sends them: concatenated, no separator."""
    return json.dumps(caracas_record) + json.dumps(valencia_record)


@pytest.fixture
def make_provider():
    """
    Factory for providers with a custom canned answer.

    Usage:
        provider = make_provider(404, "application/json", '{"message": "nope"}')
    """
    def _make(status_code=200, content_type="application/json", text="[]", reachable=True):
        return FakeCityProvider(UpstreamResponse(status_code, content_type, text), reachable)
    return _make


@pytest.fixture
def fake_provider(stream_body):
    """A provider answering 200 application/stream+json with two cities."""
    return FakeCityProvider(
        UpstreamResponse(200, "application/stream+json;charset=UTF-8", stream_body)
    )


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to our FastAPI app.
    How:     Uses ASGITransport to route requests directly to the app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from geologis.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
