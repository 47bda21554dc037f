"""
Mock Location API — Locations Route Handler
=============================================

What:  Handles GET /locations?page=&pageSize= (paginated fake records).
Why:   The one data endpoint downstream clients build against.
How:   Parses the query string leniently, delegates to LocationService,
       returns the LocationPage envelope as camelCase JSON.

Parameter policy:
    Bad pagination input never produces a 4xx. A value that is not an
    integer (`page=abc`) falls back to the default; a value below 1 is
    clamped to 1 by the service. The OpenAPI description still declares
    both parameters as integers.
"""

import logging
from typing import Annotated, Any, Callable

from fastapi import APIRouter, Depends, Query, Request, Response
from pydantic import BeforeValidator

from mock_locations.config import settings
from mock_locations.schemas.location import ErrorResponse, LocationPage
from mock_locations.services.location_service import LocationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Locations"])


def lenient_int(default: int) -> Callable[[Any], Any]:
    """Return a pre-validator that swaps unparseable values for `default`."""

    def coerce(value: Any) -> Any:
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except (TypeError, ValueError):
            logger.debug("Unparseable pagination value %r, using %d", value, default)
            return default

    return coerce


PageParam = Annotated[
    int,
    BeforeValidator(lenient_int(settings.default_page)),
    Query(description="1-based page index. Values below 1 are treated as 1."),
]
PageSizeParam = Annotated[
    int,
    BeforeValidator(lenient_int(settings.default_page_size)),
    Query(
        alias="pageSize",
        description="Records per page. Values below 1 are treated as 1; no upper bound.",
    ),
]


def get_location_service(request: Request) -> LocationService:
    """The LocationService built by create_app for this application."""
    return request.app.state.location_service


@router.get(
    "/locations",
    name="GetLocations",
    operation_id="GetLocations",
    response_model=LocationPage,
    responses={
        200: {"description": "One page of freshly generated locations", "model": LocationPage},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List mock locations with pagination",
    description=(
        "Generates a fresh corpus of fake locations on every call and returns "
        "the requested page. Records are not stable across calls unless the "
        "server runs with a fixed FAKER_SEED."
    ),
)
def get_locations(
    response: Response,
    service: Annotated[LocationService, Depends(get_location_service)],
    page: PageParam = settings.default_page,
    page_size: PageSizeParam = settings.default_page_size,
) -> LocationPage:
    """
    Return one page of mock locations.

    Declared sync so FastAPI runs the CPU-bound generation in its threadpool
    instead of on the event loop.
    """
    result = service.list_locations(page=page, page_size=page_size)

    response.headers["X-Total-Count"] = str(result.total_items)
    return result
