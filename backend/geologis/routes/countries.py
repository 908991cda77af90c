"""
Geologis Backend — Country Route Handlers
===========================================

What:  GET /v1/countries, /v1/countries/{code}, /v1/countries/name/{name}.
How:   Extracts query parameters and delegates to CountryService.

Query values `count` and `page` are taken as raw strings: a non-numeric or
non-positive value falls back to the default instead of failing with 422.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from geologis.routes.caching import STATIC_DATA_CACHE, cache_control
from geologis.schemas.geo import CountryResponse, ErrorResponse, PageResponse
from geologis.services.country_service import country_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/v1/countries",
    tags=["Countries"],
    dependencies=[Depends(cache_control(STATIC_DATA_CACHE))],
)


@router.get(
    "",
    response_model=PageResponse,
    responses={500: {"description": "Country table unavailable", "model": ErrorResponse}},
    summary="List all countries",
)
async def list_countries(
    order: Optional[str] = Query(default=None, description="'asc' (default) or 'desc' by code"),
    count: Optional[str] = Query(default=None, description="Countries per page (default 5)"),
    page: Optional[str] = Query(default=None, description="Page number (default 1)"),
) -> PageResponse:
    return country_service.list_countries(order=order, count=count, page=page)


@router.get(
    "/name/{name}",
    response_model=PageResponse,
    responses={404: {"description": "No country matches", "model": ErrorResponse}},
    summary="Search countries by name",
    description=(
        "Countries whose name starts with `name`. Unless `exact=true`, a country "
        "also matches when any single word of its name starts with `name`."
    ),
)
async def search_countries(
    name: str,
    exact: Optional[str] = Query(default=None, description="'true' to match the whole name only"),
    count: Optional[str] = Query(default=None, description="Countries per page (default 5)"),
    page: Optional[str] = Query(default=None, description="Page number (default 1)"),
) -> PageResponse:
    strict = str(exact).lower() == "true"
    return country_service.search_by_name(name, exact=strict, count=count, page=page)


@router.get(
    "/{code}",
    response_model=CountryResponse,
    responses={
        400: {"description": "Malformed code", "model": ErrorResponse},
        404: {"description": "Unknown code", "model": ErrorResponse},
    },
    summary="Get a country by ISO-2 or ISO-3 code",
)
async def get_country(code: str) -> Dict[str, Any]:
    return country_service.get_country(code)
