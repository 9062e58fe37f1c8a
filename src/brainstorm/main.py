"""Brainstorm

FastAPI sample application for collecting ideas in brainstorm sessions.
HTML pages list and create sessions, a small JSON API reads and adds ideas,
and the /failing endpoints show the exception filters at work.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from .api.routers import (
    failing_handled_router,
    failing_router,
    health_router,
    home_router,
    ideas_router,
    session_router,
)
from .config import Settings, get_settings
from .domain import InMemorySessionRepository, seed_repository
from .hosting import ApplicationEnvironment
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown logic"""
    environment: ApplicationEnvironment = app.state.environment
    logger.info(
        "Starting %s v%s (%s)",
        environment.application_name,
        app.version,
        environment.environment_name,
    )
    if environment.is_development:
        await seed_repository(app.state.session_repository)
    yield
    logger.info("Shutting down %s", environment.application_name)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Invalid request input is a client error: 400 with the validation details."""
    logger.info("Rejected %s %s: %d validation error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(
    settings: Settings | None = None,
    environment: ApplicationEnvironment | None = None,
) -> FastAPI:
    """
    Build a fully wired application.

    Every call returns an independent app with its own session repository,
    so callers (tests in particular) never share state.

    Args:
        settings: Configuration; defaults to the cached environment settings
        environment: Content root and environment name; defaults to one
            derived from ``settings``
    """
    settings = settings or get_settings()
    environment = environment or ApplicationEnvironment.from_settings(settings)
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        debug=environment.is_development,
        lifespan=lifespan,
    )
    app.state.environment = environment
    app.state.session_repository = InMemorySessionRepository()
    app.state.templates = Jinja2Templates(directory=environment.templates_path)

    # Add CORS middleware
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins.split(","),
            allow_credentials=settings.cors_credentials,
            allow_methods=settings.cors_methods.split(","),
            allow_headers=settings.cors_headers.split(","),
        )

    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    app.include_router(health_router)
    app.include_router(home_router)
    app.include_router(session_router)
    app.include_router(ideas_router)
    app.include_router(failing_router)
    app.include_router(failing_handled_router)

    return app


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "brainstorm.main:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
