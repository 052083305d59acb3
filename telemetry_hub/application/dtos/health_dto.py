"""DTOs for the /health and /info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from telemetry_hub.application.models import SystemInfo
from telemetry_hub.domain.entities.health import ReportingStatus, StoreHealth
from telemetry_hub.domain.entities.telemetry import StoreStats


class StoreStatsDTO(BaseModel):
    """Counters of the in-memory store."""

    history_size: int = Field(description="Samples currently retained")
    history_capacity: int = Field(description="Maximum samples retained")
    history_fill: float = Field(description="history_size / history_capacity")
    ingest_count: int = Field(description="Accepted ingestions since start-up")
    last_ingested_at: Optional[datetime] = Field(
        default=None, description="Time of the last accepted ingestion"
    )

    @classmethod
    def from_domain(cls, stats: StoreStats) -> "StoreStatsDTO":
        return cls(
            history_size=stats.history_size,
            history_capacity=stats.history_capacity,
            history_fill=round(stats.history_fill, 4),
            ingest_count=stats.ingest_count,
            last_ingested_at=stats.last_ingested_at,
        )


class StoreHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: ReportingStatus = Field(description="waiting or receiving")
    message: str = Field(description="Human readable status note")
    checked_at: datetime = Field(description="Timestamp of the check")
    store: StoreStatsDTO = Field(description="Store counters")

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "receiving",
                "message": "Telemetry store is receiving data.",
                "checked_at": "2025-03-01T14:05:00Z",
                "store": {
                    "history_size": 3600,
                    "history_capacity": 14400,
                    "history_fill": 0.25,
                    "ingest_count": 3600,
                    "last_ingested_at": "2025-03-01T14:04:59Z",
                },
            }
        }
    }

    @classmethod
    def from_domain(cls, health: StoreHealth) -> "StoreHealthDTO":
        return cls(
            status=health.status,
            message=health.message,
            checked_at=health.checked_at,
            store=StoreStatsDTO.from_domain(health.stats),
        )


class AlertRulesDTO(BaseModel):
    """Effective retention and alert settings."""

    history_capacity: int
    high_temperature_threshold: float
    low_temperature_threshold: float
    label_timezone: str = Field(description="IANA name, or 'local'")


class HubInfoDTO(BaseModel):
    """DTO representing the /info response payload."""

    name: str = Field(description="Application name")
    description: str = Field(description="Application description")
    version: str = Field(description="Application version")
    environment: str = Field(description="Current deployment environment")
    git_commit: str = Field(description="Git commit hash")
    build_time: str = Field(description="Build timestamp")
    started_at: datetime = Field(description="Process start timestamp")
    uptime_seconds: float = Field(description="Uptime in seconds")
    status: ReportingStatus = Field(description="Store reporting status")
    rules: AlertRulesDTO = Field(description="Effective telemetry settings")

    @classmethod
    def from_domain(
        cls,
        info: SystemInfo,
        health: StoreHealth,
        started_at: datetime,
        uptime_seconds: float,
    ) -> "HubInfoDTO":
        return cls(
            name=info.title,
            description=info.description,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=started_at,
            uptime_seconds=uptime_seconds,
            status=health.status,
            rules=AlertRulesDTO(
                history_capacity=info.history_capacity,
                high_temperature_threshold=info.high_temperature_threshold,
                low_temperature_threshold=info.low_temperature_threshold,
                label_timezone=info.label_timezone or "local",
            ),
        )
