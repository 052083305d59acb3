"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
HTTP controllers.
"""

from .health_dto import AlertRulesDTO, HubInfoDTO, StoreHealthDTO, StoreStatsDTO
from .telemetry_dto import (
    AlertDTO,
    CurrentReadingsDTO,
    HistoryEntryDTO,
    IngestAckDTO,
    TelemetryResponseDTO,
)

__all__ = [
    "AlertDTO",
    "CurrentReadingsDTO",
    "HistoryEntryDTO",
    "IngestAckDTO",
    "TelemetryResponseDTO",
    "StoreStatsDTO",
    "StoreHealthDTO",
    "AlertRulesDTO",
    "HubInfoDTO",
]
