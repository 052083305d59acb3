"""
Telemetry Store Interface

Contract for the process-wide store holding the latest snapshot and the
bounded history. Implementations must make ``ingest`` atomic with respect
to ``read``: a reader sees the state entirely before or entirely after one
ingestion, and never a history longer than ``capacity``.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from telemetry_hub.domain.entities.telemetry import (
    IngestOutcome,
    StoreStats,
    TelemetryPatch,
    TelemetryView,
)


class ITelemetryStore(ABC):
    """Interface for telemetry store implementations."""

    @property
    @abstractmethod
    def capacity(self) -> int:
        """Maximum number of retained history samples."""

    @abstractmethod
    def ingest(self, patch: TelemetryPatch, received_at: datetime) -> IngestOutcome:
        """
        Merge ``patch`` into the snapshot, then sample it into the history.

        Args:
            patch: Partial update; absent fields keep their previous value
            received_at: Timestamp recorded on the history sample

        Returns:
            The snapshot after the merge and the appended sample, if any
        """

    @abstractmethod
    def read(self) -> TelemetryView:
        """Return the snapshot and the history, oldest sample first."""

    @abstractmethod
    def stats(self) -> StoreStats:
        """Return the counters without copying the history."""
