"""
Dependency container injection module - Main Layer

Composition root wiring the single telemetry store instance into the use
cases served by the controllers.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from telemetry_hub.application.models import SystemInfo
from telemetry_hub.application.use_cases.health_use_cases import (
    GetHubInfoUseCase,
    GetStoreHealthUseCase,
)
from telemetry_hub.application.use_cases.telemetry_use_cases import (
    IngestTelemetryUseCase,
    QueryTelemetryUseCase,
)
from telemetry_hub.domain.services.alert_evaluator import AlertEvaluator
from telemetry_hub.infrastructure.stores.in_memory_telemetry_store import (
    InMemoryTelemetryStore,
)
from telemetry_hub.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    telemetry_store = providers.Singleton(
        InMemoryTelemetryStore,
        history_capacity=config.telemetry.history_capacity,
    )

    # Domain services
    alert_evaluator = providers.Singleton(
        AlertEvaluator,
        high_threshold=config.telemetry.high_temperature_threshold,
        low_threshold=config.telemetry.low_temperature_threshold,
    )

    # Application (use cases)
    ingest_telemetry_use_case = providers.Factory(
        IngestTelemetryUseCase,
        telemetry_store=telemetry_store,
    )

    query_telemetry_use_case = providers.Factory(
        QueryTelemetryUseCase,
        telemetry_store=telemetry_store,
        alert_evaluator=alert_evaluator,
        label_timezone=config.telemetry.label_timezone,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.server.title,
        description=config.server.description,
        version=config.server.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.server.git_commit,
        build_time=config.server.build_time,
        history_capacity=config.telemetry.history_capacity,
        high_temperature_threshold=config.telemetry.high_temperature_threshold,
        low_temperature_threshold=config.telemetry.low_temperature_threshold,
        label_timezone=config.telemetry.label_timezone,
    )

    get_store_health_use_case = providers.Factory(
        GetStoreHealthUseCase,
        telemetry_store=telemetry_store,
    )

    get_hub_info_use_case = providers.Factory(
        GetHubInfoUseCase,
        telemetry_store=telemetry_store,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle of the in-memory resources owned by the container.

    The store is built eagerly on startup so a bad capacity fails the boot
    instead of the first request. State is dropped on shutdown.
    """
    container = get_container()

    telemetry_store = container.telemetry_store()
    container.alert_evaluator()
    logger.info(
        "container.store.initialized",
        history_capacity=telemetry_store.capacity,
    )

    try:
        yield container
    finally:
        container.telemetry_store.reset()
        logger.info("container.resources.shutdown")
