"""
Cache-Control headers per router.

Countries and continents never change at runtime; city results come from a
live upstream and get a shorter lifetime.
"""

from typing import Callable

from fastapi import Response

STATIC_DATA_CACHE = "public, max-age=1800, s-maxage=3600"
UPSTREAM_DATA_CACHE = "public, max-age=600, s-maxage=1200"


def cache_control(value: str) -> Callable[[Response], None]:
    """Router dependency setting Cache-Control on every successful response."""

    def set_cache_control(response: Response) -> None:
        response.headers["Cache-Control"] = value

    return set_cache_control
