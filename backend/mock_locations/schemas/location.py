"""
Mock Location API — Pydantic Response Schemas
===============================================

What:  Pydantic models defining the wire contract of the API.
Why:   FastAPI uses them to serialize responses and to generate the
       OpenAPI description that downstream clients build against.
How:   Python attributes are snake_case; `alias_generator=to_camel`
       makes the JSON camelCase (`locationName`, `pageSize`, ...).
       FastAPI serializes response models by alias, so routes can
       return these objects directly.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model whose JSON field names are camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LocationRecord(CamelModel):
    """
    What:  One synthetic "last seen" location.
    Who:   Produced by LocationService, one per corpus slot.

    Records have no id. Their only identity is their position in the
    corpus of the request that generated them.
    """
    location_name: str = Field(min_length=1, description="City-like place name")
    image_url: str = Field(description="Placeholder image URL (picsum.photos)")
    timestamp: datetime = Field(
        description="Last observed moment, ISO 8601 with timezone offset"
    )


class LocationPage(CamelModel):
    """
    What:  Pagination envelope returned by GET /locations.

    `total_items` is the corpus size, not a running total: every call
    regenerates the full corpus, so it never changes with page/page_size.
    `page` and `page_size` echo the values after clamping to >= 1.
    """
    page: int = Field(description="1-based page index")
    page_size: int = Field(description="Maximum number of records in `data`")
    total_items: int = Field(description="Size of the generated corpus")
    data: List[LocationRecord] = Field(description="Records on this page")


class ErrorResponse(BaseModel):
    """Standardized error body for 5xx responses."""
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    environment: str = Field(description="Hosting environment name")
    uptime_seconds: float = Field(description="Seconds since service started")
