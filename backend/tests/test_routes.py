"""
Geologis Backend — API Endpoint Tests
=======================================

What:  HTTP-level tests for every route, through the full middleware chain.
How:   HTTPX AsyncClient over ASGITransport (see conftest.py); the city
       provider is swapped for a FakeCityProvider, settings are patched
       per test for authentication.

What we test:
    ✅ Page envelopes and single-record bodies
    ✅ Error envelopes and status codes
    ✅ Bearer token / public key authentication on /v1
    ✅ Cache-Control and X-Request-ID headers (malformed client IDs replaced)
    ✅ Health check status levels
    ✅ Access log redacts credentials
"""

import logging
from unittest.mock import patch

import pytest

from geologis.config import settings
from geologis.routes.caching import STATIC_DATA_CACHE, UPSTREAM_DATA_CACHE
from geologis.services.city_service import city_service


class TestIndexAndFallback:

    @pytest.mark.asyncio
    async def test_index(self, test_client):
        response = await test_client.get("/v1/")
        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "GBA Geologis"
        assert body["version"]

    @pytest.mark.asyncio
    async def test_unknown_route(self, test_client):
        response = await test_client.get("/v1/planets")
        assert response.status_code == 404
        assert response.json() == {"error": {"status": "not-found", "message": "Invalid route"}}

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/v1/", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", ["bad id with spaces", "x" * 65, "id;drop=1"])
    async def test_malformed_request_id_replaced(self, test_client, header):
        response = await test_client.get("/v1/", headers={"X-Request-ID": header})
        rid = response.headers["X-Request-ID"]
        assert rid != header
        assert len(rid) == 8

    @pytest.mark.asyncio
    async def test_request_id_generated_when_absent(self, test_client):
        response = await test_client.get("/v1/")
        assert len(response.headers["X-Request-ID"]) == 8


class TestCountryRoutes:

    @pytest.mark.asyncio
    async def test_list_defaults(self, test_client):
        response = await test_client.get("/v1/countries")
        assert response.status_code == 200
        body = response.json()
        assert body["page"] == 1
        assert body["count"] == 5
        assert body["totalCount"] == 250
        assert body["totalPages"] == 50
        assert body["data"][0]["code"] == "AD"
        assert response.headers["Cache-Control"] == STATIC_DATA_CACHE

    @pytest.mark.asyncio
    async def test_list_descending(self, test_client):
        response = await test_client.get("/v1/countries", params={"order": "desc", "count": "2"})
        codes = [c["code"] for c in response.json()["data"]]
        assert codes == ["ZW", "ZM"]

    @pytest.mark.asyncio
    async def test_list_garbage_params_fall_back(self, test_client):
        response = await test_client.get("/v1/countries", params={"count": "x", "page": "-4"})
        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 5
        assert body["page"] == 1

    @pytest.mark.asyncio
    async def test_get_by_iso3(self, test_client):
        response = await test_client.get("/v1/countries/ven")
        assert response.status_code == 200
        body = response.json()
        assert body["code"] == "VE"
        assert body["continent"] == "SA"
        assert body["flagURL"].endswith("/ve.svg")

    @pytest.mark.asyncio
    async def test_get_unknown(self, test_client):
        response = await test_client.get("/v1/countries/zz")
        assert response.status_code == 404
        assert response.json() == {
            "error": {"status": "not-found", "message": "No valid country found for given ISO code"}
        }

    @pytest.mark.asyncio
    async def test_get_malformed_code(self, test_client):
        response = await test_client.get("/v1/countries/v3")
        assert response.status_code == 400
        assert response.json()["error"]["status"] == "invalid-arguments"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/v1/countries/ve%0A", "/v1/countries/ve%20", "/v1/countries/v-e"])
    async def test_code_must_be_letters_only(self, test_client, path):
        """Trailing newlines or spaces make the code malformed, not a match."""
        response = await test_client.get(path)
        assert response.status_code == 400
        assert response.json() == {"error": {"status": "invalid-arguments", "message": "Bad request"}}

    @pytest.mark.asyncio
    async def test_search_exact_any_case(self, test_client):
        response = await test_client.get("/v1/countries/name/united", params={"exact": "TRUE"})
        assert response.status_code == 200
        body = response.json()
        assert body["totalCount"] == 4
        assert "flagURL" not in body["data"][0]

    @pytest.mark.asyncio
    async def test_search_word_prefix(self, test_client):
        response = await test_client.get("/v1/countries/name/kingdom")
        assert [c["code"] for c in response.json()["data"]] == ["GB"]

    @pytest.mark.asyncio
    async def test_search_no_match(self, test_client):
        response = await test_client.get("/v1/countries/name/xyzzy")
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "No country for given name"


class TestContinentRoutes:

    @pytest.mark.asyncio
    async def test_list(self, test_client):
        body = (await test_client.get("/v1/continents")).json()
        assert body["count"] == 7
        assert body["totalPages"] == 1
        assert [c["code"] for c in body["data"]] == ["AF", "AN", "AS", "EU", "NA", "OC", "SA"]

    @pytest.mark.asyncio
    async def test_get(self, test_client):
        response = await test_client.get("/v1/continents/sa")
        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "South America"
        assert body["altLangName"]["es"] == "América del Sur"

    @pytest.mark.asyncio
    async def test_get_unknown(self, test_client):
        response = await test_client.get("/v1/continents/xx")
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "No continent found for given code"

    @pytest.mark.asyncio
    async def test_countries_of_continent(self, test_client):
        response = await test_client.get("/v1/continents/SA/countries", params={"count": "20"})
        body = response.json()
        assert body["totalCount"] == 14
        assert body["count"] == 14
        assert all("continent" not in c for c in body["data"])
        assert "VE" in [c["code"] for c in body["data"]]

    @pytest.mark.asyncio
    async def test_countries_of_unknown_continent(self, test_client):
        response = await test_client.get("/v1/continents/xx/countries")
        assert response.status_code == 400
        assert response.json() == {
            "error": {"status": "invalid-parameters", "message": "Invalid continent code"}
        }


class TestCityRoutes:

    @pytest.mark.asyncio
    async def test_search(self, test_client, fake_provider):
        with patch.object(city_service, "provider", fake_provider):
            response = await test_client.get("/v1/cities/name/ca", params={"queryamount": "50"})

        assert response.status_code == 200
        assert response.headers["Cache-Control"] == UPSTREAM_DATA_CACHE
        body = response.json()
        assert body["totalCount"] == 2
        assert body["data"][0]["id"] == "VECCS"
        assert fake_provider.calls == [("ca", 50, None)]

    @pytest.mark.asyncio
    async def test_search_in_country(self, test_client, fake_provider):
        with patch.object(city_service, "provider", fake_provider):
            response = await test_client.get("/v1/cities/country/VEN/name/ca")

        assert response.status_code == 200
        assert fake_provider.calls == [("ca", 20, "VE")]

    @pytest.mark.asyncio
    async def test_search_in_unknown_country(self, test_client, fake_provider):
        with patch.object(city_service, "provider", fake_provider):
            response = await test_client.get("/v1/cities/country/zz/name/ca")

        assert response.status_code == 400
        assert response.json()["error"]["status"] == "invalid-arguments"

    @pytest.mark.asyncio
    async def test_query_amount_too_large(self, test_client, fake_provider):
        with patch.object(city_service, "provider", fake_provider):
            response = await test_client.get("/v1/cities/name/ca", params={"queryamount": "500"})

        assert response.status_code == 400
        assert fake_provider.calls == []

    @pytest.mark.asyncio
    async def test_upstream_error_status_relayed(self, test_client, make_provider):
        provider = make_provider(502, "application/json", '{"message": "Bad gateway"}')
        with patch.object(city_service, "provider", provider):
            response = await test_client.get("/v1/cities/name/ca")

        assert response.status_code == 502
        assert response.json() == {"error": {"status": "not-found", "message": "Bad gateway"}}

    @pytest.mark.asyncio
    async def test_internal_error_carries_support(self, test_client, make_provider):
        provider = make_provider(200, "text/html", "<html></html>")
        with patch.object(city_service, "provider", provider):
            response = await test_client.get("/v1/cities/name/ca")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["status"] == "internal"
        assert error["support"] == settings.support_contact


class TestAuthentication:

    @pytest.mark.asyncio
    async def test_missing_token_rejected(self, test_client):
        with patch.object(settings, "api_bearer_token", "secret"):
            response = await test_client.get("/v1/countries")

        assert response.status_code == 403
        assert response.json() == {"error": {"status": "unauthorized", "message": "Unauthorized"}}

    @pytest.mark.asyncio
    async def test_wrong_token_rejected(self, test_client):
        with patch.object(settings, "api_bearer_token", "secret"):
            response = await test_client.get(
                "/v1/countries", headers={"Authorization": "Bearer nope"}
            )
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_valid_token_accepted(self, test_client):
        with patch.object(settings, "api_bearer_token", "secret"):
            response = await test_client.get(
                "/v1/countries", headers={"Authorization": "Bearer secret"}
            )
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_public_key_accepted(self, test_client):
        with patch.object(settings, "api_bearer_token", "secret"), \
             patch.object(settings, "api_public_key", "pk-123"):
            response = await test_client.get("/v1/countries", params={"publickey": "pk-123"})
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_empty_public_key_never_matches(self, test_client):
        with patch.object(settings, "api_bearer_token", "secret"):
            response = await test_client.get("/v1/countries", params={"publickey": ""})
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_health_is_open(self, test_client, fake_provider):
        with patch.object(settings, "api_bearer_token", "secret"), \
             patch.object(city_service, "provider", fake_provider):
            response = await test_client.get("/health")
        assert response.status_code == 200


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client, fake_provider):
        with patch.object(city_service, "provider", fake_provider):
            body = (await test_client.get("/health")).json()

        assert body["status"] == "healthy"
        assert body["upstream"] == "available"
        assert body["countries"] == 250
        assert body["continents"] == 7

    @pytest.mark.asyncio
    async def test_degraded_when_upstream_unreachable(self, test_client, make_provider):
        with patch.object(city_service, "provider", make_provider(reachable=False)):
            response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_public_key_is_redacted(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="geologis.access")
        await test_client.get("/v1/countries", params={"publickey": "pk-123", "count": "2"})

        [line] = [r.getMessage() for r in caplog.records if r.name == "geologis.access"]
        assert "/v1/countries?publickey=REDACTED&count=2 200" in line
        assert "pk-123" not in line

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, fake_provider, caplog):
        caplog.set_level(logging.INFO, logger="geologis.access")
        with patch.object(city_service, "provider", fake_provider):
            await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "geologis.access"]
