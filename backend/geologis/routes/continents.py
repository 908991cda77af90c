"""
Geologis Backend — Continent Route Handlers
=============================================

What:  GET /v1/continents, /v1/continents/{code}, /v1/continents/{code}/countries.
How:   Extracts query parameters and delegates to ContinentService.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from geologis.routes.caching import STATIC_DATA_CACHE, cache_control
from geologis.schemas.geo import ContinentResponse, ErrorResponse, PageResponse
from geologis.services.continent_service import continent_service

router = APIRouter(
    prefix="/v1/continents",
    tags=["Continents"],
    dependencies=[Depends(cache_control(STATIC_DATA_CACHE))],
)


@router.get("", response_model=PageResponse, summary="List all continents")
async def list_continents(
    order: Optional[str] = Query(default=None, description="'asc' (default) or 'desc' by code"),
    count: Optional[str] = Query(default=None, description="Continents per page (default 7)"),
    page: Optional[str] = Query(default=None, description="Page number (default 1)"),
) -> PageResponse:
    return continent_service.list_continents(order=order, count=count, page=page)


@router.get(
    "/{code}",
    response_model=ContinentResponse,
    response_model_exclude_none=True,
    responses={404: {"description": "Unknown continent", "model": ErrorResponse}},
    summary="Get a continent by code",
)
async def get_continent(code: str) -> Dict[str, Any]:
    return continent_service.get_continent(code)


@router.get(
    "/{code}/countries",
    response_model=PageResponse,
    responses={400: {"description": "Unknown continent", "model": ErrorResponse}},
    summary="List the countries of a continent",
    description="Country records omit `continent`, which is implied by the path.",
)
async def list_continent_countries(
    code: str,
    order: Optional[str] = Query(default=None, description="'asc' (default) or 'desc' by code"),
    count: Optional[str] = Query(default=None, description="Countries per page (default 5)"),
    page: Optional[str] = Query(default=None, description="Page number (default 1)"),
) -> PageResponse:
    return continent_service.list_countries(code, order=order, count=count, page=page)
