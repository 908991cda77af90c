"""
Geologis Backend — Abstract City Lookup Provider
==================================================

What:  Abstract base class defining the contract for third-party city lookups.
How:   Concrete providers inherit from CityLookupProvider and implement
       search_cities() and health_check().
Who:   Called by CityService for every city search.

Providers return the raw upstream answer (status, content type, body text).
Interpreting it (stream splitting, error relaying) stays in CityService so
every provider goes through the same normalization.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UpstreamResponse:
    """Raw answer of a city lookup provider."""
    status_code: int
    content_type: str
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class CityLookupProvider(ABC):
    """
    Abstract interface for third-party city search services.

    Contract:
        - search_cities() performs exactly one request: no retry, no
          timeout override beyond the transport default
        - Non-2xx answers are returned, not raised
        - Transport failures raise UpstreamUnavailableError
    """

    @abstractmethod
    async def search_cities(
        self,
        name: str,
        page_size: int,
        country_code: Optional[str] = None,
    ) -> UpstreamResponse:
        """
        Search cities by name, optionally inside one country.

        Args:
            name:         City name (prefix) to search for
            page_size:    Maximum number of records the provider should return
            country_code: ISO-2 code restricting the search, if any

        Raises:
            UpstreamUnavailableError: The provider could not be reached.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the provider is reachable.

        Returns: True if it answered at all (any HTTP status), False otherwise.
        """
        ...

    async def aclose(self) -> None:
        """Release transport resources; called on application shutdown."""
        return None
