"""
Geologis Backend — Health Check Route
=======================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Reports the size of the static tables and whether the city lookup
       provider is reachable.
Who:   Called by Docker health checks, load balancers and monitoring.

Status levels:
    - healthy:   tables loaded and upstream reachable (HTTP 200)
    - degraded:  upstream unreachable; countries/continents still served (HTTP 200)
"""

import logging
import time

from fastapi import APIRouter

from geologis import __version__
from geologis.data import CONTINENT_TABLE, COUNTRY_TABLE
from geologis.schemas.geo import HealthResponse
from geologis.services.city_service import city_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description=(
        "Returns the health status of the service and the reachability of the "
        "city lookup provider. Not behind authentication."
    ),
)
async def health_check() -> HealthResponse:
    upstream_status = "available"
    overall = "healthy"

    if not await city_service.provider.health_check():
        upstream_status = "unavailable"
        overall = "degraded"
        logger.warning("Health check: city lookup provider unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        countries=len(COUNTRY_TABLE),
        continents=len(CONTINENT_TABLE),
        upstream=upstream_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
