import logging
from contextlib import asynccontextmanager
from pathlib import Path
from urllib.parse import urlparse

import logfire
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from interview.application.api.v1.errors import map_interview_error
from interview.application.api.v1.routes import experiences, health
from interview.application.di import create_container
from interview.config import Config, configure_logging
from interview.domain.shared.error import InterviewError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.dishka_container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application.

    Used by uvicorn as an app factory; tests pass an explicit config.
    """
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    logfire.instrument_fastapi(app_instance)

    container = create_container(config)
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(experiences.router, prefix="/api/v1")

    # Local blob store: serve stored images at the path of its base URL
    if config.storage.backend == "local":
        local = config.storage.local
        media_path = urlparse(local.base_url).path.rstrip("/") or "/media"
        Path(local.path).mkdir(parents=True, exist_ok=True)
        app_instance.mount(media_path, StaticFiles(directory=local.path), name="media")

    # Global error handler - maps domain and infrastructure errors to HTTP responses
    @app_instance.exception_handler(InterviewError)
    async def interview_error_handler(request: Request, exc: InterviewError):
        http_exc = map_interview_error(exc)
        if http_exc.status_code >= 500:
            logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
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
