"""
Domain Entities Package

Snapshot, patch, history sample, alert and store health value objects together
with the domain error hierarchy.
"""

from .alert import AlertKind, AlertRecord
from .errors import DomainError, InvalidConfigurationError, MalformedPayloadError
from .health import ReportingStatus, StoreHealth
from .telemetry import (
    HistorySample,
    IngestOutcome,
    SnapshotState,
    StoreStats,
    TelemetryPatch,
    TelemetryView,
)

__all__ = [
    "AlertKind",
    "AlertRecord",
    "SnapshotState",
    "TelemetryPatch",
    "HistorySample",
    "IngestOutcome",
    "TelemetryView",
    "StoreStats",
    "StoreHealth",
    "ReportingStatus",
    "DomainError",
    "MalformedPayloadError",
    "InvalidConfigurationError",
]
