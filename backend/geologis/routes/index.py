"""
Geologis Backend — API Index Route
====================================

What:  GET /v1/ describes the service; clients use it to check their
       credentials and the API version.
"""

from fastapi import APIRouter

from geologis import __version__
from geologis.schemas.geo import IndexResponse

router = APIRouter(tags=["Index"])


@router.get("/v1/", response_model=IndexResponse, summary="API description")
async def index() -> IndexResponse:
    return IndexResponse(
        name="GBA Geologis",
        description="API for geographical information (countries, continents, cities, etc)",
        version=__version__,
    )
