"""In-memory state holders backing the telemetry store contract."""

from .history_log import HistoryLog
from .in_memory_telemetry_store import InMemoryTelemetryStore
from .snapshot_store import SnapshotStore

__all__ = ["HistoryLog", "InMemoryTelemetryStore", "SnapshotStore"]
