"""
Geologis Backend — Request ID Middleware
==========================================

What:  Assigns a correlation ID to each incoming request and echoes it back.
How:   A client-supplied X-Request-ID is reused when it looks like an ID
       (letters, digits, `.`, `_`, `-`; at most 64 characters). Anything
       else is replaced by a short UUID, so the value written to the access
       log and the upstream timing logs is never caller-controlled text.
When:  Outermost of the application middlewares, so the access log, the
       auth middleware and the exception handlers all see the ID.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
CLIENT_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")

# Read by loggers in services (maersk_service) and middleware
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(header_value: str) -> str:
    """The client's ID when it is well-formed, otherwise a fresh one."""
    if header_value and CLIENT_ID_PATTERN.fullmatch(header_value):
        return header_value
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER, ""))
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
