"""
Logging Configuration - Shared Layer

Routes stdlib logging and structlog through a single ProcessorFormatter so
uvicorn, FastAPI and application events share one output format: JSON lines
in production, coloured console output everywhere else.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from telemetry_hub.shared.consts import EnumEnvironment

DEFAULT_LOG_LEVEL = "INFO"


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _select_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _build_handlers(file_path: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if file_path:
        handlers.append(logging.FileHandler(file_path))
    return handlers


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Configure stdlib logging and structlog for the process.

    Called once at import of the application module with environment
    variable fallbacks, then again from the settings object once it is
    loaded.

    Args:
        level: Log level name. Falls back to LOG_LEVEL, then INFO.
        file_path: Optional extra log file. Falls back to LOG_FILE_PATH.
        environment: Deployment environment. Falls back to ENVIRONMENT.
    """
    log_level = (level or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    env_value = environment or os.environ.get(
        "ENVIRONMENT", EnumEnvironment.DEVELOPMENT.value
    )
    numeric_level = getattr(logging, log_level, logging.INFO)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(env_value),
        foreign_pre_chain=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        ],
    )

    handlers = _build_handlers(log_file)
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.getLogger(__name__).debug(
        "Logging configured with level %s (file: %s)", log_level, log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """Reconfigure logging from a loaded ``AppSettings`` instance."""
    try:
        level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)
        configure_logging(
            level=level,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except (AttributeError, OSError) as exc:
        logging.error("Failed to update logging from settings: %s", exc)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
