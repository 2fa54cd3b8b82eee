from __future__ import annotations

"""Page/sort service - Main Application Entry Point
This is the FastAPI application factory for the list-query normalisation service.
Architecture Overview:
    - core.pagination normalises offset/limit/sortBy/sortDir per endpoint config
    - Feature-based modular architecture (see features/ directory)
    - Validation failures are mapped to HTTP 400 envelopes here, once
Entry Points:
    - /health - Health check endpoint
    - /api/v1/months - Month names, paginated and sortable by name or days
"""

import logging
import time

from core.utils.env import is_production
# Track startup time in non-production environments
start_time = time.time() if not is_production() else None

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.config import Settings, settings as default_settings
from core.exceptions import ConfigurationError, PageSortValidationError
from core.http.errors import format_configuration_error, format_validation_error
from core.logging import setup_logging
from core.observability import register_http_request_logging
from features.months import router as months_router

setup_logging()

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory returning a configured FastAPI instance."""

    settings = settings or default_settings

    app = FastAPI(
        title="Page/sort service",
        description="Offset/limit/sort normalisation for list endpoints",
        version="1.0.0",
        debug=settings.debug_mode,
    )

    if settings.exception_handling_enabled:

        @app.exception_handler(PageSortValidationError)
        async def page_sort_validation_error_handler(request: Request, exc: PageSortValidationError):
            """Return a structured 400 envelope for rejected list-query parameters."""

            payload = format_validation_error(exc)
            return JSONResponse(status_code=payload["code"], content=payload)

        logger.info("PageSortValidationError handler is enabled")
    else:
        logger.info("PageSortValidationError handler disabled by PAGESORT_EXCEPTION_HANDLING_ENABLED")

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        """Return a structured API envelope for configuration errors."""

        logger.error("Configuration error on %s: %s", request.url.path, exc)
        payload = format_configuration_error(exc)
        return JSONResponse(status_code=payload["code"], content=payload)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": "1.0.0"}

    register_http_request_logging(app)

    app.include_router(months_router, prefix="/api/v1")

    # Add timing info for non-production
    timing_info = ""
    if start_time is not None:
        elapsed = time.time() - start_time
        timing_info = f" (loaded in {elapsed:.2f}s)"

    logger.info(f"Application created with months router{timing_info}")
    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
