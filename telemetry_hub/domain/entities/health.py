"""
Store health entities.

The hub has no external dependencies, so its health is whether the device
has reported since start-up, judged from the store's counters.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from telemetry_hub.domain.entities.telemetry import StoreStats


class ReportingStatus(str, Enum):
    """Whether the device has pushed anything since the process started."""

    WAITING = "waiting"
    RECEIVING = "receiving"


@dataclass(frozen=True, slots=True)
class StoreHealth:
    """Verdict on the telemetry store at ``checked_at``."""

    status: ReportingStatus
    stats: StoreStats
    checked_at: datetime

    @classmethod
    def assess(cls, stats: StoreStats, checked_at: datetime) -> "StoreHealth":
        status = (
            ReportingStatus.RECEIVING
            if stats.ingest_count > 0
            else ReportingStatus.WAITING
        )
        return cls(status=status, stats=stats, checked_at=checked_at)

    @property
    def message(self) -> str:
        if self.status is ReportingStatus.WAITING:
            return "No telemetry received yet."
        return "Telemetry store is receiving data."
