"""
Geologis Backend — Maersk Locations Provider
==============================================

What:  CityLookupProvider backed by the public Maersk locations API.
How:   One GET per search through a shared httpx.AsyncClient:

           GET {maersk_locations_url}?cityName=<name>&type=city
               &pageSize=<n>&sort=cityName[&countryCode=<ISO-2>]

       The client follows redirects. It is created on first use and closed
       in the app lifespan.
Who:   Called by CityService.

Upstream answers:
    - 2xx `application/stream+json`: concatenated JSON objects (see
      city_normalizer)
    - 2xx `application/json`: a regular JSON document
    - non-2xx: JSON body with a `message` field, relayed to the caller
"""

import logging
import time
from typing import Optional

import httpx

from geologis.config import settings
from geologis.exceptions import UpstreamUnavailableError
from geologis.middleware.request_id import request_id_var
from geologis.services.provider_base import CityLookupProvider, UpstreamResponse

logger = logging.getLogger(__name__)


class MaerskLocationsService(CityLookupProvider):
    """City search against api.maersk.com/locations."""

    LOCATION_TYPE = "city"
    SORT_FIELD = "cityName"

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.maersk_locations_url
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(follow_redirects=True, transport=self._transport)
        return self._client

    async def search_cities(
        self,
        name: str,
        page_size: int,
        country_code: Optional[str] = None,
    ) -> UpstreamResponse:
        params = {
            "cityName": name,
            "type": self.LOCATION_TYPE,
            "pageSize": page_size,
            "sort": self.SORT_FIELD,
        }
        if country_code:
            params["countryCode"] = country_code

        rid = request_id_var.get("")
        start_time = time.perf_counter()
        try:
            response = await self.client.get(self.base_url, params=params)
        except httpx.HTTPError as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "[%s] Maersk locations request failed after %.0fms: %s",
                rid,
                duration_ms,
                str(e),
            )
            raise UpstreamUnavailableError(
                context={"request_id": rid, "error_type": type(e).__name__},
            ) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        content_type = response.headers.get("Content-Type", "")
        logger.info(
            "[%s] Maersk locations answered %d (%s) in %.0fms",
            rid,
            response.status_code,
            content_type or "no content type",
            duration_ms,
        )
        return UpstreamResponse(
            status_code=response.status_code,
            content_type=content_type,
            text=response.text,
        )

    async def health_check(self) -> bool:
        """
        Probe the locations endpoint with a one-record search.

        Any HTTP answer counts as reachable; only transport errors fail.
        """
        try:
            await self.client.get(
                self.base_url,
                params={"cityName": "a", "type": self.LOCATION_TYPE, "pageSize": 1},
            )
            return True
        except httpx.HTTPError as e:
            logger.warning("Maersk locations health check failed: %s", str(e))
            return False

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None


# ── Singleton Instance ────────────────────────────────────────────────────
# One instance so all requests share the httpx connection pool.
maersk_service = MaerskLocationsService()
