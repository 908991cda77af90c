"""
Geologis Backend — Continent Service
======================================

What:  Business logic behind the /v1/continents routes.
Who:   Called by routes/continents.py.
"""

import logging
from typing import Any, Dict, Optional

from geologis.exceptions import InvalidParametersError, NotFoundError
from geologis.schemas.geo import PageResponse
from geologis.services.dataset_service import dataset_service
from geologis.services.ordering import sort_records
from geologis.services.pagination import build_page

logger = logging.getLogger(__name__)

DEFAULT_CONTINENTS_COUNT = 7
DEFAULT_COUNTRIES_COUNT = 5


class ContinentService:
    """
    Responsibilities:
        - list_continents(): whole continent table, sorted by code
        - get_continent(): single lookup by continent code
        - list_countries(): countries of one continent, sorted by code
    """

    def list_continents(
        self,
        order: Optional[str] = None,
        count: Any = None,
        page: Any = None,
    ) -> PageResponse:
        continents = sort_records(dataset_service.list_continents(), order)
        return build_page(continents, DEFAULT_CONTINENTS_COUNT, count, page)

    def get_continent(self, code: str) -> Dict[str, Any]:
        continent = dataset_service.find_continent(code)
        if continent is None:
            raise NotFoundError(
                message="No continent found for given code",
                context={"code": code},
            )
        return continent

    def list_countries(
        self,
        code: str,
        order: Optional[str] = None,
        count: Any = None,
        page: Any = None,
    ) -> PageResponse:
        """
        Countries of the continent `code`, without their `continent` field.

        Raises:
            InvalidParametersError: `code` is not a known continent.
            NotFoundError:          The continent has no countries.
        """
        continent = dataset_service.find_continent(code)
        if continent is None:
            raise InvalidParametersError(
                message="Invalid continent code",
                context={"code": code},
            )

        countries = dataset_service.countries_by_continent(continent["code"])
        if not countries:
            raise NotFoundError(
                message="No countries found for given continent",
                context={"code": continent["code"]},
            )
        return build_page(sort_records(countries, order), DEFAULT_COUNTRIES_COUNT, count, page)


continent_service = ContinentService()
