"""Use cases behind the /health and /info endpoints."""

from datetime import datetime
from typing import Optional

from telemetry_hub.application.dtos.health_dto import HubInfoDTO, StoreHealthDTO
from telemetry_hub.application.models import SystemInfo
from telemetry_hub.domain.entities.health import StoreHealth
from telemetry_hub.domain.repositories.telemetry_store import ITelemetryStore
from telemetry_hub.shared.clock import Clock, utc_now


class GetStoreHealthUseCase:
    """Judge the store from its counters; the history is never copied."""

    def __init__(self, telemetry_store: ITelemetryStore, clock: Clock = utc_now):
        self._telemetry_store = telemetry_store
        self._clock = clock

    async def execute(self) -> StoreHealthDTO:
        health = StoreHealth.assess(self._telemetry_store.stats(), self._clock())
        return StoreHealthDTO.from_domain(health)


class GetHubInfoUseCase:
    """Build metadata, uptime and the effective alert rules."""

    def __init__(
        self,
        telemetry_store: ITelemetryStore,
        system_info: SystemInfo,
        clock: Clock = utc_now,
    ) -> None:
        self._telemetry_store = telemetry_store
        self._info = system_info
        self._clock = clock

    async def execute(self, started_at: Optional[datetime]) -> HubInfoDTO:
        now = self._clock()
        started = started_at or now
        health = StoreHealth.assess(self._telemetry_store.stats(), now)

        return HubInfoDTO.from_domain(
            self._info,
            health,
            started_at=started,
            uptime_seconds=max(0.0, (now - started).total_seconds()),
        )
