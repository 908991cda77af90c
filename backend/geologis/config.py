"""
Geologis Backend — Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated before the app starts.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    Production deployments MUST set API_BEARER_TOKEN and CORS_ORIGINS.
    """

    # ── Upstream city lookup (Maersk locations API) ───────────────────────
    maersk_locations_url: str = Field(
        default="https://api.maersk.com/locations/",
        description="Locations endpoint queried for city searches",
    )

    # What: pageSize sent upstream when the caller gives no queryamount
    default_query_amount: int = Field(default=20, ge=1, le=100)

    # What: Largest queryamount a caller may request
    max_query_amount: int = Field(default=100, ge=1, le=1000)

    # ── Dataset ───────────────────────────────────────────────────────────
    # What: Template for the derived flagURL; {code} is the lower-cased ISO-2 code
    flag_url_template: str = Field(
        default="https://static.vesselfinder.net/images/flags/4x3/{code}.svg",
    )

    # ── Errors ────────────────────────────────────────────────────────────
    # What: Contact attached to every `internal` error envelope
    support_contact: str = Field(
        default="You can send us an email to support@gbalogistic.com",
    )

    # ── Authentication ────────────────────────────────────────────────────
    # What: Token expected in `Authorization: Bearer <token>` for /v1 routes
    # Empty disables authentication (local development only)
    api_bearer_token: str = Field(default="")

    # What: Value accepted in the `publickey` query parameter instead of a token
    api_public_key: str = Field(default="")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("flag_url_template")
    @classmethod
    def validate_flag_url_template(cls, v: str) -> str:
        """The template must carry a {code} placeholder."""
        if "{code}" not in v:
            raise ValueError("flag_url_template must contain a '{code}' placeholder")
        return v

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # API_BEARER_TOKEN and api_bearer_token both work
        "extra": "ignore",
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that critical settings are configured.
        When:  Called during app startup (lifespan).
        How:   Checks each required field and raises ValueError with guidance.
        """
        errors = []
        if not self.api_bearer_token:
            errors.append(
                "API_BEARER_TOKEN is not set. Every /v1 route is served without authentication."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Module singleton; tests override values through environment variables
settings = Settings()
