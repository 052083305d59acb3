"""
Use Cases Package - Application Layer

Use cases orchestrate the telemetry store and the alert rule on behalf of
the HTTP controllers.
"""

from .health_use_cases import GetHubInfoUseCase, GetStoreHealthUseCase
from .telemetry_use_cases import (
    IngestTelemetryUseCase,
    QueryTelemetryUseCase,
    decode_payload,
)

__all__ = [
    "IngestTelemetryUseCase",
    "QueryTelemetryUseCase",
    "decode_payload",
    "GetStoreHealthUseCase",
    "GetHubInfoUseCase",
]
