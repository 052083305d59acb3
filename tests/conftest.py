from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Iterator

import pytest

from telemetry_hub.domain.entities.telemetry import HistorySample
from telemetry_hub.domain.services.alert_evaluator import AlertEvaluator
from telemetry_hub.infrastructure.stores.in_memory_telemetry_store import (
    InMemoryTelemetryStore,
)

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TickingClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime) -> None:
        self._current = start
        self.calls = 0

    def __call__(self) -> datetime:
        value = self._current
        self._current += timedelta(seconds=1)
        self.calls += 1
        return value


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2025, 3, 1, 14, 5, 0, tzinfo=timezone.utc)


@pytest.fixture()
def ticking_clock(fixed_now: datetime) -> TickingClock:
    return TickingClock(fixed_now)


@pytest.fixture()
def telemetry_store() -> InMemoryTelemetryStore:
    return InMemoryTelemetryStore()


@pytest.fixture()
def alert_evaluator() -> AlertEvaluator:
    return AlertEvaluator()


@pytest.fixture()
def make_sample(fixed_now: datetime) -> Callable[[int], HistorySample]:
    def _make(index: int) -> HistorySample:
        return HistorySample(
            timestamp=fixed_now + timedelta(seconds=index),
            temperature=float(index),
            humidity=float(index) / 2,
        )

    return _make


@pytest.fixture()
def clean_env(monkeypatch) -> Iterator[None]:
    for name in (
        "ENVIRONMENT",
        "TELEMETRY_HISTORY_CAPACITY",
        "TELEMETRY_HIGH_TEMPERATURE_THRESHOLD",
        "TELEMETRY_LOW_TEMPERATURE_THRESHOLD",
        "TELEMETRY_LABEL_TIMEZONE",
        "SERVER_TITLE",
        "SERVER_HOST",
        "SERVER_PORT",
        "GIT_COMMIT",
        "SERVER_GIT_COMMIT",
        "LOG_LEVEL",
        "LOG_FILE_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
