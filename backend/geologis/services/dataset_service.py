"""
Geologis Backend — Dataset Service (Country & Continent Lookups)
==================================================================

What:  Read-only query layer over the static country and continent tables.
How:   Exact matching by ISO code / continent code, prefix matching by name.
       Every record handed out is a fresh dict copy of the frozen table row,
       so callers may reshape results freely.
Who:   Called by CountryService, ContinentService and the city normalizer.

Matching rules:
    - Codes are stripped and lower-cased, then compared case-insensitively.
      A country matches on either its ISO-2 `code` or its `code_iso3`.
    - Name search is "starts-with", never "contains": the whole normalized
      name must start with the query, or (non-exact mode) one of its
      whitespace-delimited words must.
"""

import logging
import unicodedata
from typing import Any, Dict, List, Mapping, Optional, Sequence

from geologis.config import settings
from geologis.data import CONTINENT_TABLE, COUNTRY_TABLE
from geologis.exceptions import DatasetUnavailableError

logger = logging.getLogger(__name__)


def _thaw(value: Any) -> Any:
    """Deep-copy a frozen table value back into plain dicts."""
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    return value


def _normalize_code(code: Any) -> Optional[str]:
    if not code or not isinstance(code, str):
        return None
    return code.strip().lower() or None


def _normalize_text(text: str) -> str:
    return unicodedata.normalize("NFC", text).strip().lower()


class DatasetService:
    """
    Lookup operations over the country and continent tables.

    The tables are injected so tests can run against small fixtures; the
    module singleton below uses the real frozen tables.
    """

    def __init__(
        self,
        countries: Optional[Sequence[Mapping[str, Any]]] = COUNTRY_TABLE,
        continents: Optional[Sequence[Mapping[str, Any]]] = CONTINENT_TABLE,
    ):
        self._countries = countries
        self._continents = continents

    # ── Countries ─────────────────────────────────────────────────────────

    def find_country(self, code: Any) -> Optional[Dict[str, Any]]:
        """
        Find a country by ISO-2 or ISO-3 code.

        Returns:
            A copy of the country enriched with `flagURL`, or None when the
            code is empty, not a string or unknown.
        """
        processed = _normalize_code(code)
        if processed is None:
            return None

        for record in self._countries or ():
            if (
                str(record["code"]).lower() == processed
                or str(record["code_iso3"]).lower() == processed
            ):
                country = _thaw(record)
                country["flagURL"] = settings.flag_url_template.format(
                    code=str(record["code"]).lower()
                )
                return country
        return None

    def list_countries(self) -> List[Dict[str, Any]]:
        """
        Full country table in storage order.

        Raises:
            DatasetUnavailableError: The table is missing or empty.
        """
        if not self._countries:
            logger.error("Country table is unavailable")
            raise DatasetUnavailableError(dataset="countries")
        return [_thaw(record) for record in self._countries]

    def filter_countries_by_name(self, query: str, exact: bool = False) -> List[Dict[str, Any]]:
        """
        Countries whose name starts with `query`.

        Both sides are NFC-normalized, stripped and lower-cased. With
        `exact=False` a country also matches when any single word of its
        name starts with the query ("kingdom" finds "United Kingdom").
        """
        normalized_query = _normalize_text(str(query))
        matches = []
        for country in self.list_countries():
            normalized_name = _normalize_text(str(country["name"]))
            full_name_matches = normalized_name.startswith(normalized_query)
            word_matches = any(
                word.startswith(normalized_query) for word in normalized_name.split()
            )
            if full_name_matches or (not exact and word_matches):
                matches.append(country)
        return matches

    def countries_by_continent(self, continent_code: Any) -> List[Dict[str, Any]]:
        """
        Countries of one continent, without their `continent` attribute.

        The continent is implied by the request, so each record drops it.
        An unknown or empty code yields an empty list.
        """
        processed = _normalize_code(continent_code)
        if processed is None:
            return []

        result = []
        for country in self.list_countries():
            continent = country.pop("continent", None)
            if continent and str(continent).lower() == processed:
                result.append(country)
        return result

    # ── Continents ────────────────────────────────────────────────────────

    def find_continent(self, code: Any) -> Optional[Dict[str, Any]]:
        """Find a continent by code (case-insensitive); None when unknown."""
        processed = _normalize_code(code)
        if processed is None:
            return None

        for record in self._continents or ():
            if str(record["code"]).lower() == processed:
                return _thaw(record)
        return None

    def list_continents(self) -> List[Dict[str, Any]]:
        """
        Full continent table in storage order.

        Raises:
            DatasetUnavailableError: The table is missing or empty.
        """
        if not self._continents:
            logger.error("Continent table is unavailable")
            raise DatasetUnavailableError(dataset="continents")
        return [_thaw(record) for record in self._continents]


# ── Singleton Instance ────────────────────────────────────────────────────
dataset_service = DatasetService()
