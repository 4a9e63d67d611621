import logging

import logfire
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nsync.application.api.v1.errors import map_nsync_error
from nsync.application.api.v1.routes import health, recipes
from nsync.application.di import create_container
from nsync.config import Config, configure_logging
from nsync.domain.shared.error import NsyncError
from nsync.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
    )

    logfire.instrument_fastapi(app_instance)

    container = create_container(config)
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(recipes.router, prefix="/api/v1")

    # Global nsync error handler - maps domain and infrastructure errors to HTTP responses
    @app_instance.exception_handler(NsyncError)
    async def nsync_error_handler(request: Request, exc: NsyncError):
        http_exc = map_nsync_error(exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
        )

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app_instance
