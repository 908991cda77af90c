"""
Geologis Backend — Pydantic Response Schemas
==============================================

What:  Pydantic models defining the API contract of the geographic routes.
How:   FastAPI uses these models to serialize responses and generate the
       OpenAPI documentation.

List items are kept as plain dicts inside PageResponse: City objects omit
every falsy field and continent-scoped country lists omit `continent`, so
the item shape is decided by the service, not by a fixed model.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class PageResponse(BaseModel):
    """
    What:  Envelope shared by every list endpoint.

    totalPages is round(totalCount / count) rounded half-up and at least 1.
    It is NOT a ceiling division, so a trailing partial page smaller than
    half of `count` is not counted (23 items, count 10 → 2 pages; items
    21-23 are unreachable). Clients relying on totalPages inherit this.
    """
    page: int = Field(description="Current page (1-based, clamped to totalPages)")
    totalPages: int = Field(description="Number of pages (rounded, at least 1)")
    count: int = Field(description="Items per page after clamping")
    totalCount: int = Field(description="Number of items before pagination")
    data: List[Dict[str, Any]] = Field(description="Items of the current page")


class CountryResponse(BaseModel):
    """Single country as returned by GET /v1/countries/{code}."""
    code: str = Field(description="ISO 3166-1 alpha-2 code")
    code_iso3: str = Field(description="ISO 3166-1 alpha-3 code")
    name: str = Field(description="English short name")
    phone_code: Optional[str] = Field(default=None, description="International dialing code")
    continent: Optional[str] = Field(default=None, description="Continent code")
    flagURL: Optional[str] = Field(default=None, description="SVG flag URL")


class ContinentResponse(BaseModel):
    """Single continent as returned by GET /v1/continents/{code}."""
    code: str = Field(description="Continent code")
    name: str = Field(description="English name")
    altLangName: Optional[Dict[str, str]] = Field(
        default=None,
        description="Names in other languages keyed by language code",
    )


class IndexResponse(BaseModel):
    """Service description returned by GET /v1/."""
    name: str
    description: str
    version: str


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorBody(BaseModel):
    """
    Fields:
        status:  invalid-arguments | invalid-parameters | not-found | internal | unauthorized
        message: Human-readable description
        support: Contact hint, present on internal errors only
    """
    status: str = Field(description="Machine-readable error status")
    message: str = Field(description="Human-readable error description")
    support: Optional[str] = Field(default=None, description="Support contact")


class ErrorResponse(BaseModel):
    """
    Standardized error envelope for all API errors.

    Example:
        {"error": {"status": "not-found", "message": "No continent found for given code"}}
    """
    error: ErrorBody


class HealthResponse(BaseModel):
    """Health check response showing service and dependency status."""
    status: str = Field(description="Overall service status: healthy, degraded")
    version: str = Field(description="Application version")
    countries: int = Field(description="Records in the country table")
    continents: int = Field(description="Records in the continent table")
    upstream: str = Field(description="City lookup provider: available, unavailable")
    uptime_seconds: float = Field(description="Seconds since service started")
