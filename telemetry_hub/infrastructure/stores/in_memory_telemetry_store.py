"""Process-local telemetry store guarded by a single lock."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Optional

from telemetry_hub.domain.entities.telemetry import (
    HistorySample,
    IngestOutcome,
    SnapshotState,
    StoreStats,
    TelemetryPatch,
    TelemetryView,
)
from telemetry_hub.domain.repositories.telemetry_store import ITelemetryStore
from telemetry_hub.infrastructure.stores.history_log import HistoryLog
from telemetry_hub.infrastructure.stores.snapshot_store import SnapshotStore
from telemetry_hub.shared import get_logger
from telemetry_hub.shared.consts import DEFAULT_HISTORY_CAPACITY

logger = get_logger(__name__)


class InMemoryTelemetryStore(ITelemetryStore):
    """
    Owns the snapshot and the history log for the lifetime of the process.

    Merge-then-append and the combined read each run under one
    ``threading.Lock``, so handlers on the event loop and handlers in the
    threadpool can share the instance. Nothing is persisted.
    """

    def __init__(
        self,
        history_capacity: int = DEFAULT_HISTORY_CAPACITY,
        initial_snapshot: Optional[SnapshotState] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._snapshot = SnapshotStore(initial_snapshot)
        self._history = HistoryLog(history_capacity)
        self._ingest_count = 0
        self._last_ingested_at: Optional[datetime] = None

    @property
    def capacity(self) -> int:
        return self._history.capacity

    def ingest(self, patch: TelemetryPatch, received_at: datetime) -> IngestOutcome:
        with self._lock:
            snapshot = self._snapshot.merge(patch)
            sample = HistorySample.from_snapshot(snapshot, received_at)
            if sample is not None:
                self._history.append(sample)
            self._ingest_count += 1
            self._last_ingested_at = received_at
            history_size = len(self._history)

        if sample is None:
            logger.debug("store.history.skipped", reason="no_climate_reading")
        return IngestOutcome(snapshot=snapshot, sample=sample, history_size=history_size)

    def read(self) -> TelemetryView:
        with self._lock:
            return TelemetryView(
                snapshot=self._snapshot.read(),
                history=self._history.read_all(),
                history_capacity=self._history.capacity,
            )

    def stats(self) -> StoreStats:
        with self._lock:
            return StoreStats(
                history_size=len(self._history),
                history_capacity=self._history.capacity,
                ingest_count=self._ingest_count,
                last_ingested_at=self._last_ingested_at,
            )
