"""
Geologis Backend — Country Service
====================================

What:  Business logic behind the /v1/countries routes.
How:   Reads the dataset through DatasetService, sorts/filters, and builds
       the list envelope with the shared pagination engine. Every failure
       leaves as a typed exception for the global handlers.
Who:   Called by routes/countries.py.
"""

import logging
import re
from typing import Any, Dict, Optional

from geologis.exceptions import InvalidArgumentsError, NotFoundError
from geologis.schemas.geo import PageResponse
from geologis.services.dataset_service import dataset_service
from geologis.services.ordering import sort_records
from geologis.services.pagination import build_page

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 5

# ISO codes are letters only; parentheses are tolerated as in legacy links
COUNTRY_CODE_PATTERN = re.compile(r"[a-zA-Z()]+")


class CountryService:
    """
    Responsibilities:
        - list_countries(): whole table, sorted by code, paginated
        - get_country(): single lookup by ISO-2/ISO-3 code
        - search_by_name(): prefix search on names, paginated
    """

    def list_countries(
        self,
        order: Optional[str] = None,
        count: Any = None,
        page: Any = None,
    ) -> PageResponse:
        countries = sort_records(dataset_service.list_countries(), order)
        return build_page(countries, DEFAULT_COUNT, count, page)

    def get_country(self, code: str) -> Dict[str, Any]:
        """
        Raises:
            InvalidArgumentsError: `code` holds anything but letters/parentheses.
            NotFoundError:         No country has this ISO-2/ISO-3 code.
        """
        if not COUNTRY_CODE_PATTERN.fullmatch(code or ""):
            raise InvalidArgumentsError(message="Bad request", field="code")

        country = dataset_service.find_country(code)
        if country is None:
            raise NotFoundError(
                message="No valid country found for given ISO code",
                context={"code": code},
            )
        return country

    def search_by_name(
        self,
        name: str,
        exact: bool = False,
        count: Any = None,
        page: Any = None,
    ) -> PageResponse:
        """
        Countries whose name (or, unless `exact`, one of its words) starts
        with `name`, in storage order.

        Raises:
            NotFoundError: Nothing matches.
        """
        matches = dataset_service.filter_countries_by_name(name, exact=exact)
        if not matches:
            raise NotFoundError(message="No country for given name", context={"name": name})

        logger.debug("Name search %r (exact=%s) matched %d countries", name, exact, len(matches))
        return build_page(matches, DEFAULT_COUNT, count, page)


country_service = CountryService()
