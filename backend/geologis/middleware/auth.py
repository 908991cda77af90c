"""
Geologis Backend — Bearer Authentication Middleware
=====================================================

What:  Guards every /v1 route with a shared secret.
How:   A request passes when either
           - its `publickey` query parameter equals settings.api_public_key, or
           - its `Authorization: Bearer <token>` header equals settings.api_bearer_token.
       Anything else is answered 403 with the error envelope.
When:  After request ID and access logging, so rejected calls are logged
       with their correlation ID.

With no bearer token configured the middleware lets everything through
(local development); startup logs a configuration warning in that case.
"""

import hmac
import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from geologis.config import settings
from geologis.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

PROTECTED_PREFIX = "/v1"
BEARER_PREFIX = "Bearer "


def _matches(candidate: str, secret: str) -> bool:
    return bool(secret) and hmac.compare_digest(candidate.encode(), secret.encode())


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """
    Shared-secret authentication for the versioned API.

    Excluded paths:
        Everything outside /v1 (health check, OpenAPI docs).
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if not (path == PROTECTED_PREFIX or path.startswith(PROTECTED_PREFIX + "/")):
            return await call_next(request)

        if not settings.api_bearer_token:
            return await call_next(request)

        public_key = request.query_params.get("publickey", "")
        if _matches(public_key, settings.api_public_key):
            logger.info("Requested with public key")
            return await call_next(request)

        authorization = request.headers.get("Authorization", "")
        if authorization.startswith(BEARER_PREFIX):
            token = authorization[len(BEARER_PREFIX):]
            if _matches(token, settings.api_bearer_token):
                return await call_next(request)

        logger.warning("[%s] Unauthorized request to %s", request_id_var.get(""), path)
        return JSONResponse(
            status_code=403,
            content={"error": {"status": "unauthorized", "message": "Unauthorized"}},
        )
