"""
Main Application - Main Layer

Entry point for the FastAPI application: configures logging, builds the
container, attaches the CORS policy and includes the routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from telemetry_hub.main.config import get_settings
from telemetry_hub.main.container import app_lifespan, init_container
from telemetry_hub.presentation.controllers import system_router, telemetry_router
from telemetry_hub.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Configure logging with basic settings first - before configuration is loaded
configure_logging()

logger = get_logger(__name__)

# Cross-origin access is a fixed policy: the dashboard may be served from
# any origin.
CORS_ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
CORS_MAX_AGE_SECONDS = 86400


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the start time and manage container resources."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()
    update_logging_from_settings(settings)

    init_container(settings)

    app = FastAPI(
        title=settings.server.title,
        description=settings.server.description,
        version=settings.server.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=["*"],
        max_age=CORS_MAX_AGE_SECONDS,
    )

    app.include_router(telemetry_router)
    app.include_router(system_router)

    return app


app = create_app()
