"""
Telemetry DTOs - Application Layer

Wire shapes of the ingestion acknowledgement and of the combined
current/history/alert view polled by the dashboard. Field aliases keep the
camelCase keys the dashboard reads.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from telemetry_hub.domain.entities.alert import AlertKind, AlertRecord
from telemetry_hub.domain.entities.telemetry import HistorySample, SnapshotState
from telemetry_hub.shared.consts import INGEST_ACK_MESSAGE
from telemetry_hub.shared.rounding import round_half_up

TIME_LABEL_FORMAT = "%I:%M %p"


def format_time_label(timestamp: datetime, label_timezone: Optional[tzinfo]) -> str:
    """Render ``timestamp`` as a 12-hour ``hh:mm AM`` label.

    ``label_timezone`` of ``None`` means the server's local timezone.
    """
    return timestamp.astimezone(label_timezone).strftime(TIME_LABEL_FORMAT)


class IngestAckDTO(BaseModel):
    """Acknowledgement returned for an accepted ingestion."""

    message: str = Field(default=INGEST_ACK_MESSAGE, description="Status message")

    model_config = {
        "json_schema_extra": {"example": {"message": INGEST_ACK_MESSAGE}}
    }


class CurrentReadingsDTO(BaseModel):
    """Latest known value per field, temperature and humidity rounded."""

    temperature: Optional[float] = Field(
        description="Ambient temperature in °C, one decimal place"
    )
    humidity: Optional[float] = Field(
        description="Relative humidity in %, one decimal place"
    )
    cpu_temperature: float = Field(alias="cpuTemp", description="CPU temperature")
    board_temperature: float = Field(
        alias="lm75Temp", description="Board sensor temperature"
    )
    memory_use: str = Field(alias="memoryUse", description="Free memory label")
    cpu_usage: float = Field(alias="cpuUse", description="CPU usage percent")
    wifi_rssi: int = Field(alias="wifiRssi", description="Wi-Fi signal in dBm")
    last_updated: datetime = Field(
        alias="lastUpdated", description="Time this view was generated"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "temperature": 27.3,
                "humidity": 50.1,
                "cpuTemp": 41.5,
                "lm75Temp": 26.9,
                "memoryUse": "200.00KB",
                "cpuUse": 12.5,
                "wifiRssi": -61,
                "lastUpdated": "2025-03-01T14:05:00Z",
            }
        },
    )

    @classmethod
    def from_domain(
        cls, snapshot: SnapshotState, generated_at: datetime
    ) -> "CurrentReadingsDTO":
        return cls(
            temperature=(
                round_half_up(snapshot.temperature, 1)
                if snapshot.temperature is not None
                else None
            ),
            humidity=(
                round_half_up(snapshot.humidity, 1)
                if snapshot.humidity is not None
                else None
            ),
            cpu_temperature=snapshot.cpu_temperature,
            board_temperature=snapshot.board_temperature,
            memory_use=snapshot.memory_use_label,
            cpu_usage=snapshot.cpu_usage_percent,
            wifi_rssi=snapshot.wifi_signal_dbm,
            last_updated=generated_at,
        )


class HistoryEntryDTO(BaseModel):
    """One retained sample with its display label."""

    name: str = Field(description="Time label, e.g. '02:05 PM'")
    timestamp: datetime = Field(description="Sample timestamp")
    temperature: float = Field(description="Temperature, one decimal place")
    humidity: float = Field(description="Humidity, one decimal place")

    @classmethod
    def from_domain(
        cls, sample: HistorySample, label_timezone: Optional[tzinfo] = None
    ) -> "HistoryEntryDTO":
        return cls(
            name=format_time_label(sample.timestamp, label_timezone),
            timestamp=sample.timestamp,
            temperature=sample.temperature,
            humidity=sample.humidity,
        )


class AlertDTO(BaseModel):
    """Derived alert."""

    kind: AlertKind = Field(alias="type", description="Alert severity")
    message: str = Field(description="Human readable alert")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, alert: AlertRecord) -> "AlertDTO":
        return cls(kind=alert.kind, message=alert.message)


class TelemetryResponseDTO(BaseModel):
    """Combined read returned on every dashboard poll."""

    current: CurrentReadingsDTO = Field(description="Latest readings")
    history: List[HistoryEntryDTO] = Field(
        default_factory=list, description="Retained samples, oldest first"
    )
    alert: Optional[AlertDTO] = Field(
        default=None, description="Current alert, null when none applies"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "current": {
                    "temperature": 27.3,
                    "humidity": 50.1,
                    "cpuTemp": 40.0,
                    "lm75Temp": 0.0,
                    "memoryUse": "0KB",
                    "cpuUse": 0.0,
                    "wifiRssi": 0,
                    "lastUpdated": "2025-03-01T14:05:00Z",
                },
                "history": [
                    {
                        "name": "02:04 PM",
                        "timestamp": "2025-03-01T14:04:58Z",
                        "temperature": 27.3,
                        "humidity": 50.1,
                    }
                ],
                "alert": {"type": "warning", "message": "High temperature detected!"},
            }
        }
    }
