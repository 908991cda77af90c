"""
Geologis Backend — Access Logging Middleware
==============================================

What:  One access log line per HTTP request.
How:   Times the rest of the stack, then logs method, path, query, status,
       duration, request ID and client IP. 5xx logs at ERROR, 4xx at
       WARNING, the rest at INFO.
When:  Inside RequestIDMiddleware (uses the request ID for correlation).

The `publickey` query parameter is a credential and is logged as REDACTED.
"""

import logging
import time
from urllib.parse import urlencode

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from geologis.middleware.request_id import request_id_var

logger = logging.getLogger("geologis.access")

UNLOGGED_PATHS = frozenset({"/health"})
REDACTED_PARAMS = frozenset({"publickey"})


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def _redacted_query(request: Request) -> str:
    items = [
        (key, "REDACTED" if key in REDACTED_PARAMS else value)
        for key, value in request.query_params.multi_items()
    ]
    return urlencode(items)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Typical durations:
        - GET /v1/countries: 1-5ms (in-memory table)
        - GET /v1/cities/name/{name}: 300-2000ms (upstream call dominates)
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in UNLOGGED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        query = _redacted_query(request)
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        logger.log(
            _level_for(response.status_code),
            "%s %s%s %d %.1fms [%s] from %s",
            request.method,
            path,
            f"?{query}" if query else "",
            response.status_code,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response
