"""
Mock Location API — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
       A typo in LOG_LEVEL or ENVIRONMENT fails at import, not mid-request.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the generator, and the middleware.
When:  Loaded once at module import time.
"""

from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


VALID_ENVIRONMENTS = {"development", "staging", "production"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The defaults give the stock API:
    a 100-record corpus, page 1 / page size 10, picsum images at 640x480,
    and timestamps from the last day.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # What: Hosting environment; Swagger UI is only served in development
    environment: str = Field(default="development")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    # What: Redirect plain HTTP requests to HTTPS
    # Off by default: local runs and the test client talk plain HTTP
    https_redirect: bool = Field(default=False)

    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    # ── Generation ────────────────────────────────────────────────────────
    # What: Size of the corpus built for every request
    total_items: int = Field(default=100, ge=0)

    default_page: int = Field(default=1, ge=1)
    default_page_size: int = Field(default=10, ge=1)

    # What: Timestamps fall within the last `recent_days` days
    recent_days: int = Field(default=1, ge=1, le=365)

    image_width: int = Field(default=640, ge=1, le=5000)
    image_height: int = Field(default=480, ge=1, le=5000)

    faker_locale: str = Field(default="en_US")

    # What: Fixed seed for every generation run
    # Unset: each request yields a different corpus
    # Set:   identical parameters yield identical records across requests
    faker_seed: Optional[int] = Field(default=None)

    # What: IANA zone used to express timestamps (e.g. "America/Los_Angeles")
    # Unset: the server's local offset
    timestamp_timezone: Optional[str] = Field(default=None)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        lower = v.strip().lower()
        if lower not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {VALID_ENVIRONMENTS}"
            )
        return lower

    @field_validator("timestamp_timezone")
    @classmethod
    def validate_timestamp_timezone(cls, v: Optional[str]) -> Optional[str]:
        """Rejects zone names the tz database does not know."""
        if v is None or not v.strip():
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timestamp_timezone '{v}'")
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


# Singleton instance, imported throughout the application
settings = Settings()
