"""
Mock Location API — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, exception
       handlers and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn mock_locations.main:app`) or the `run()` entry point.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │ HTTPS (opt.) │→│ Req ID   │→│  Logging        │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────────┐ ┌─────────┐  │
    │  │GET /locations│ │GET /markdown     │ │GET      │  │
    │  │              │ │GET /requirement  │ │/health  │  │
    │  └──────────────┘ └──────────────────┘ └─────────┘  │
    │                                                     │
    │  Swagger UI: /swagger (development only)            │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import JSONResponse

from mock_locations import __version__
from mock_locations.config import Settings, settings as default_settings
from mock_locations.exceptions import MockLocationsError, RecordGenerationError
from mock_locations.middleware.logging import RequestLoggingMiddleware
from mock_locations.middleware.request_id import RequestIDMiddleware, request_id_var
from mock_locations.routes import exercise, health, locations
from mock_locations.services.location_service import LocationService

logger = logging.getLogger(__name__)

API_TITLE = "Mock Location API"
API_VERSION = "v1"
SWAGGER_URL = "/swagger"
OPENAPI_URL = f"/swagger/{API_VERSION}/swagger.json"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called from the lifespan hook, before the first request is served.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already logs every request with timing
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("faker").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    config: Settings = app.state.settings

    setup_logging(config.log_level)
    logger.info("Mock Location API %s starting (%s)", __version__, config.environment)
    logger.info(
        "Corpus: %d records, default page size %d, seed=%s",
        config.total_items,
        config.default_page_size,
        config.faker_seed,
    )
    if config.is_development:
        logger.info("Swagger UI: http://%s:%d%s", config.host, config.port, SWAGGER_URL)

    yield

    logger.info("Mock Location API shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to JSON error responses.

    Handler hierarchy:
        RecordGenerationError   → 500 generation_error
        MockLocationsError      → 500 server_error
        Exception (fallback)    → 500 internal_server_error

    Internal detail (context, stack traces) is logged, never returned.
    """

    @app.exception_handler(RecordGenerationError)
    async def handle_generation_error(request: Request, exc: RecordGenerationError):
        rid = request_id_var.get("")
        logger.error("[%s] Generation error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "generation_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(MockLocationsError)
    async def handle_app_error(request: Request, exc: MockLocationsError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic 500, full stack trace in the server log only."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again later.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to build the app with. Defaults to the module-level
                singleton; tests pass their own to get seeded or production
                variants.

    Swagger UI and the OpenAPI document are only mounted in development.
    """
    config = config or default_settings
    docs_enabled = config.is_development

    app = FastAPI(
        title=API_TITLE,
        description="A minimal API that returns mock location data generated with Faker.",
        version=API_VERSION,
        docs_url=SWAGGER_URL if docs_enabled else None,
        redoc_url=None,
        openapi_url=OPENAPI_URL if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.location_service = LocationService(config)

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = outermost)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    if config.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    register_exception_handlers(app)

    app.include_router(locations.router)
    app.include_router(exercise.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn on the configured host/port."""
    import uvicorn

    uvicorn.run(
        "mock_locations.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
