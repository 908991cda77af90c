"""
Geologis Backend — City Service (Upstream Search Orchestrator)
================================================================

What:  Coordinates validate → fetch upstream → normalize → paginate for the
       /v1/cities routes.
How:   Composes a CityLookupProvider, the city normalizer, the dataset (for
       country validation) and the pagination engine.
Who:   Called by routes/cities.py.

Orchestration Flow:
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌────────────┐
    │ Validate │───▶│  Provider   │───▶│  Normalizer  │───▶│  Paginate  │
    │  params  │    │  (upstream) │    │ split+reshape│    │  envelope  │
    └──────────┘    └─────────────┘    └──────────────┘    └────────────┘

Upstream answer handling:
    non-2xx                       → NotFoundError with the upstream status and message
    2xx application/stream+json   → parse_stream() → to_city_model()
    2xx application/json (list)   → to_city_model()
    anything else                 → InternalError
"""

import json
import logging
from typing import Any, Dict, List, Optional

from geologis.config import settings
from geologis.exceptions import InternalError, InvalidArgumentsError, NotFoundError
from geologis.schemas.geo import PageResponse
from geologis.services.city_normalizer import parse_stream, to_city_model
from geologis.services.dataset_service import dataset_service
from geologis.services.maersk_service import maersk_service
from geologis.services.pagination import build_page, coerce_int
from geologis.services.provider_base import CityLookupProvider, UpstreamResponse

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 5

STREAM_JSON = "application/stream+json"
STANDARD_JSON = "application/json"


class CityService:
    """
    City search through a third-party provider.

    The provider is injected so tests can substitute a fake; the module
    singleton uses the Maersk locations provider.
    """

    def __init__(self, provider: Optional[CityLookupProvider] = None):
        self.provider = provider or maersk_service

    async def search(
        self,
        name: str,
        country_code: Optional[str] = None,
        query_amount: Any = None,
        count: Any = None,
        page: Any = None,
    ) -> PageResponse:
        """
        Search cities by name, optionally inside one country.

        Args:
            name:         City name to search for (required)
            country_code: ISO-2 or ISO-3 code; must exist in the local dataset
            query_amount: Records requested from the upstream (default 20,
                          at most settings.max_query_amount)
            count, page:  Raw pagination query values

        Raises:
            InvalidArgumentsError: Missing name, unknown country code, or
                query_amount above the maximum.
            NotFoundError:  Upstream answered non-2xx, or no city matched.
            InternalError:  Upstream unreachable or its payload unusable.
        """
        if not name:
            raise InvalidArgumentsError(message="name parameter is required", field="name")

        upstream_country = None
        if country_code is not None:
            country = dataset_service.find_country(country_code)
            if country is None:
                raise InvalidArgumentsError(
                    message="A valid ISO alpha-2 or ISO alpha-3 country code must be provided",
                    field="countryCode",
                )
            upstream_country = country["code"]

        amount = coerce_int(query_amount)
        if amount < 1:
            amount = settings.default_query_amount
        if amount > settings.max_query_amount:
            raise InvalidArgumentsError(
                message=f"queryamount parameter must be less than {settings.max_query_amount}",
                field="queryamount",
            )

        response = await self.provider.search_cities(name, amount, country_code=upstream_country)
        cities = self._cities_from_response(response)

        if not cities:
            raise NotFoundError(
                message="No cities found for given name",
                context={"name": name, "country": upstream_country},
            )
        return build_page(cities, DEFAULT_COUNT, count, page)

    def _cities_from_response(self, response: UpstreamResponse) -> List[Dict[str, Any]]:
        if not response.ok:
            raise NotFoundError(
                message=self._upstream_message(response),
                status_code=response.status_code,
                context={"upstream_status": response.status_code},
            )

        if STREAM_JSON in response.content_type:
            records = parse_stream(response.text)
            if records is None:
                logger.error("Upstream stream body held no records")
                raise InternalError(message="something went wrong")
        elif STANDARD_JSON in response.content_type:
            records = self._standard_json_records(response.text)
        else:
            logger.error("Unexpected upstream content type: %r", response.content_type)
            raise InternalError(message="Something went wrong retrieving cities")

        cities = to_city_model(records)
        if cities is None:
            raise InternalError(message="something went wrong")
        return cities

    @staticmethod
    def _standard_json_records(text: str) -> List[Any]:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error("Upstream JSON body could not be decoded: %s", str(e))
            raise InternalError(message="Something went wrong retrieving cities") from e
        if not isinstance(payload, list):
            logger.error("Upstream JSON body is a %s, expected a list", type(payload).__name__)
            raise InternalError(message="Something went wrong retrieving cities")
        return payload

    @staticmethod
    def _upstream_message(response: UpstreamResponse) -> str:
        """The upstream's own `message`, or a generic fallback."""
        try:
            payload = json.loads(response.text)
        except json.JSONDecodeError:
            return "Invalid arguments"
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return "Invalid arguments"


city_service = CityService()
