"""
Geologis Backend — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn geologis.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────────────┐
    │                       FastAPI App                           │
    │                                                             │
    │  Middleware Chain:                                          │
    │  ┌────────┐ ┌─────────┐ ┌──────┐ ┌──────┐ ┌──────────────┐  │
    │  │ Req ID │→│ Logging │→│ GZip │→│ CORS │→│ Bearer Auth  │  │
    │  └────────┘ └─────────┘ └──────┘ └──────┘ └──────────────┘  │
    │                                                             │
    │  Routes:                                                    │
    │  /v1/  /v1/countries  /v1/continents  /v1/cities  /health   │
    │                                                             │
    │  Exception Handlers:                                        │
    │  GeologisError → envelope │ 404 → Invalid route │ * → 500   │
    └─────────────────────────────────────────────────────────────┘

Every error leaves as
    {"error": {"status": "...", "message": "...", "support": "..."}}
with `support` only on internal errors.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from geologis import __version__
from geologis.config import settings
from geologis.data import CONTINENT_TABLE, COUNTRY_TABLE
from geologis.exceptions import ContractViolationError, GeologisError, InternalError
from geologis.middleware.auth import BearerAuthMiddleware
from geologis.middleware.logging import RequestLoggingMiddleware
from geologis.middleware.request_id import RequestIDMiddleware, request_id_var
from geologis.routes import cities, continents, countries, health, index
from geologis.services.city_service import city_service

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Structured Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    When:    Called once during app startup (before any other initialization).
    Format:  %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Per-request noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Validate configuration (logged, not fatal)
        3. Log dataset sizes
    Shutdown:
        1. Close the upstream HTTP client
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Geologis Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.warning("Configuration warning: %s", str(e))

    logger.info(
        "Datasets loaded: %d countries, %d continents",
        len(COUNTRY_TABLE),
        len(CONTINENT_TABLE),
    )
    logger.info("City lookup provider: %s", type(city_service.provider).__name__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Geologis Backend shutting down...")
    await city_service.provider.aclose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(
    status_code: int,
    status: str,
    message: str,
    support: Optional[str] = None,
) -> JSONResponse:
    """Render the error envelope."""
    body = {"status": status, "message": message}
    if support:
        body["support"] = support
    return JSONResponse(status_code=status_code, content={"error": body})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ContractViolationError → 500 internal (programmer error, generic message)
        InternalError          → 500 internal (message + support contact)
        GeologisError          → exc.status_code / exc.status
        HTTPException          → 404 "Invalid route", otherwise invalid-arguments
        RequestValidationError → 400 invalid-arguments
        Exception (fallback)   → 500 internal

    Internal details (context, tracebacks) are logged server-side only.
    """

    @app.exception_handler(ContractViolationError)
    async def handle_contract_violation(request: Request, exc: ContractViolationError):
        """A core helper was called with arguments it never accepts."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] Contract violation (%s): %s | Context: %s",
            rid,
            type(exc).__name__,
            exc.message,
            exc.context,
        )
        return error_response(
            500, "internal", "Something unknown went wrong", support=settings.support_contact
        )

    @app.exception_handler(InternalError)
    async def handle_internal_error(request: Request, exc: InternalError):
        rid = request_id_var.get("")
        logger.error("[%s] Internal error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(
            exc.status_code, exc.status, exc.message, support=settings.support_contact
        )

    @app.exception_handler(GeologisError)
    async def handle_geologis_error(request: Request, exc: GeologisError):
        """Caller-fixable errors: invalid arguments/parameters, not found."""
        rid = request_id_var.get("")
        logger.info("[%s] %s: %s", rid, exc.status, exc.message)
        return error_response(exc.status_code, exc.status, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return error_response(404, "not-found", "Invalid route")
        return error_response(exc.status_code, "invalid-arguments", str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return error_response(400, "invalid-arguments", "Bad request")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for truly unexpected errors.

        Stack trace is logged server-side only.
        """
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return error_response(
            500, "internal", "Something unknown went wrong", support=settings.support_contact
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Geologis API",
        description=(
            "Geographic data API: countries, continents, and city search "
            "through the Maersk locations service."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition: RequestID runs first,
    # BearerAuth last (after CORS has answered preflight requests).
    app.add_middleware(BearerAuthMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=500)

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(index.router)
    app.include_router(countries.router)
    app.include_router(continents.router)
    app.include_router(cities.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()
