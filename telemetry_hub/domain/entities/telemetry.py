"""
Telemetry domain entities.

The device pushes partial updates, so the model separates the latest value
per field (``SnapshotState``), the optional-field update applied to it
(``TelemetryPatch``) and the retained trend points (``HistorySample``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple

from telemetry_hub.shared.rounding import format_kilobytes, round_half_up

# Patch attribute -> accepted wire keys. The first key is the canonical name,
# the rest are the firmware's native sensor-prefixed names.
PATCH_FIELD_KEYS: Dict[str, Tuple[str, ...]] = {
    "board_temperature": ("board_temp", "lm75_temp"),
    "temperature": ("ambient_temp", "sht20_temp"),
    "humidity": ("ambient_humidity", "sht20_humi"),
    "cpu_temperature": ("cpu_temp", "esp32_temp"),
    "free_memory_bytes": ("free_memory_bytes", "ram_free"),
    "cpu_usage_percent": ("cpu_usage",),
    "wifi_signal_dbm": ("wifi_rssi",),
}

_INTEGER_FIELDS = frozenset({"wifi_signal_dbm"})


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _as_integer(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


@dataclass(frozen=True, slots=True)
class SnapshotState:
    """Most recently received value for every measured field."""

    temperature: Optional[float] = 23.5
    humidity: Optional[float] = 45.2
    cpu_temperature: float = 40.0
    board_temperature: float = 0.0
    memory_use_label: str = "0KB"
    cpu_usage_percent: float = 0.0
    wifi_signal_dbm: int = 0

    @property
    def has_climate_reading(self) -> bool:
        """True when both temperature and humidity hold numbers."""
        return self.temperature is not None and self.humidity is not None

    def merged(self, patch: "TelemetryPatch") -> "SnapshotState":
        """Return a copy with every field present in ``patch`` overwritten."""
        changes: Dict[str, Any] = {}
        if patch.board_temperature is not None:
            changes["board_temperature"] = patch.board_temperature
        if patch.temperature is not None:
            changes["temperature"] = patch.temperature
        if patch.humidity is not None:
            changes["humidity"] = patch.humidity
        if patch.cpu_temperature is not None:
            changes["cpu_temperature"] = patch.cpu_temperature
        if patch.free_memory_bytes is not None:
            changes["memory_use_label"] = format_kilobytes(patch.free_memory_bytes)
        if patch.cpu_usage_percent is not None:
            changes["cpu_usage_percent"] = patch.cpu_usage_percent
        if patch.wifi_signal_dbm is not None:
            changes["wifi_signal_dbm"] = patch.wifi_signal_dbm
        if not changes:
            return self
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class TelemetryPatch:
    """
    Partial telemetry update where every field is optional.

    Building a patch never fails: unknown keys are dropped and known keys
    carrying a value of the wrong shape are recorded in ``rejected_keys``
    and otherwise ignored. The merge is intentionally lossy.
    """

    board_temperature: Optional[float] = None
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    cpu_temperature: Optional[float] = None
    free_memory_bytes: Optional[float] = None
    cpu_usage_percent: Optional[float] = None
    wifi_signal_dbm: Optional[int] = None
    rejected_keys: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "TelemetryPatch":
        values: Dict[str, Any] = {}
        rejected: List[str] = []

        for attribute, keys in PATCH_FIELD_KEYS.items():
            for key in keys:
                if key not in payload:
                    continue
                raw = payload[key]
                if attribute in _INTEGER_FIELDS:
                    value = _as_integer(raw)
                else:
                    value = _as_number(raw)
                if value is None:
                    rejected.append(key)
                    continue
                values[attribute] = value
                break

        return cls(**values, rejected_keys=tuple(rejected))

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in PATCH_FIELD_KEYS)


@dataclass(frozen=True, slots=True)
class HistorySample:
    """One retained (temperature, humidity) observation."""

    timestamp: datetime
    temperature: float
    humidity: float

    @classmethod
    def from_snapshot(
        cls, snapshot: SnapshotState, timestamp: datetime
    ) -> Optional["HistorySample"]:
        """Sample the snapshot, or ``None`` if it has no climate reading."""
        temperature, humidity = snapshot.temperature, snapshot.humidity
        if temperature is None or humidity is None:
            return None
        return cls(
            timestamp=timestamp,
            temperature=round_half_up(temperature, 1),
            humidity=round_half_up(humidity, 1),
        )


@dataclass(frozen=True, slots=True)
class IngestOutcome:
    """Result of applying one patch to the store."""

    snapshot: SnapshotState
    sample: Optional[HistorySample]
    history_size: int


@dataclass(frozen=True, slots=True)
class TelemetryView:
    """Consistent read of the store taken inside a single critical section."""

    snapshot: SnapshotState
    history: Tuple[HistorySample, ...]
    history_capacity: int


@dataclass(frozen=True, slots=True)
class StoreStats:
    """Ingestion counters and history fill level, without the samples."""

    history_size: int
    history_capacity: int
    ingest_count: int = 0
    last_ingested_at: Optional[datetime] = None

    @property
    def history_fill(self) -> float:
        """Fraction of the history capacity in use, between 0 and 1."""
        return self.history_size / self.history_capacity
