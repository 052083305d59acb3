"""
Server Entry Point - Main Layer

Runs the FastAPI application under uvicorn with the configured bind
address.
"""

import uvicorn

from telemetry_hub.main.config import get_settings
from telemetry_hub.shared import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Start uvicorn serving ``telemetry_hub.main.app:app``."""
    settings = get_settings()

    logger.info(
        "server.starting",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        environment=settings.environment.value,
    )

    uvicorn.run(
        "telemetry_hub.main.app:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_config=None,
    )
