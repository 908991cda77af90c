"""
Geologis Backend — City Route Handlers
========================================

What:  GET /v1/cities/name/{name} and /v1/cities/country/{countryCode}/name/{name}.
How:   Extracts query parameters and awaits CityService.search(), which
       queries the Maersk locations API.

The upstream may also return towns, regions or terminals matching the name;
only `type=city` is requested but results are not filtered further.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from geologis.routes.caching import UPSTREAM_DATA_CACHE, cache_control
from geologis.schemas.geo import ErrorResponse, PageResponse
from geologis.services.city_service import city_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/v1/cities",
    tags=["Cities"],
    dependencies=[Depends(cache_control(UPSTREAM_DATA_CACHE))],
)

CITY_ERROR_RESPONSES = {
    400: {"description": "Invalid arguments", "model": ErrorResponse},
    404: {"description": "No city found / upstream refused", "model": ErrorResponse},
    500: {"description": "Upstream unreachable or unusable", "model": ErrorResponse},
}


@router.get(
    "/name/{name}",
    response_model=PageResponse,
    responses=CITY_ERROR_RESPONSES,
    summary="Search cities by name",
)
async def search_cities(
    name: str,
    queryamount: Optional[str] = Query(
        default=None,
        description="Records fetched from the upstream before pagination (default 20, max 100)",
    ),
    count: Optional[str] = Query(default=None, description="Cities per page (default 5)"),
    page: Optional[str] = Query(default=None, description="Page number (default 1)"),
) -> PageResponse:
    return await city_service.search(
        name,
        query_amount=queryamount,
        count=count,
        page=page,
    )


@router.get(
    "/country/{countryCode}/name/{name}",
    response_model=PageResponse,
    responses=CITY_ERROR_RESPONSES,
    summary="Search cities by name inside one country",
)
async def search_cities_in_country(
    countryCode: str,
    name: str,
    queryamount: Optional[str] = Query(
        default=None,
        description="Records fetched from the upstream before pagination (default 20, max 100)",
    ),
    count: Optional[str] = Query(default=None, description="Cities per page (default 5)"),
    page: Optional[str] = Query(default=None, description="Page number (default 1)"),
) -> PageResponse:
    return await city_service.search(
        name,
        country_code=countryCode,
        query_amount=queryamount,
        count=count,
        page=page,
    )
