from __future__ import annotations

from datetime import timedelta

from telemetry_hub.application.dtos.health_dto import (
    HubInfoDTO,
    StoreHealthDTO,
    StoreStatsDTO,
)
from telemetry_hub.application.models import SystemInfo
from telemetry_hub.domain.entities.health import ReportingStatus, StoreHealth
from telemetry_hub.domain.entities.telemetry import StoreStats


def test_store_stats_dto_rounds_fill_ratio(fixed_now) -> None:
    dto = StoreStatsDTO.from_domain(
        StoreStats(
            history_size=1,
            history_capacity=3,
            ingest_count=1,
            last_ingested_at=fixed_now,
        )
    )

    assert dto.history_fill == 0.3333
    assert dto.last_ingested_at == fixed_now


def test_store_health_dto_from_domain(fixed_now) -> None:
    health = StoreHealth.assess(
        StoreStats(history_size=0, history_capacity=14400), fixed_now
    )

    body = StoreHealthDTO.from_domain(health).model_dump(mode="json")

    assert body["status"] == "waiting"
    assert body["message"] == "No telemetry received yet."
    assert body["store"]["ingest_count"] == 0
    assert body["store"]["last_ingested_at"] is None


def test_hub_info_dto_reports_rules(fixed_now) -> None:
    info = SystemInfo(
        title="Telemetry Hub",
        description="desc",
        version="1.0.0",
        environment="development",
        git_commit="abc",
        build_time="2025-03-01",
        history_capacity=14400,
        high_temperature_threshold=26.0,
        low_temperature_threshold=21.0,
    )
    health = StoreHealth.assess(
        StoreStats(history_size=1, history_capacity=14400, ingest_count=1),
        fixed_now,
    )

    dto = HubInfoDTO.from_domain(
        info,
        health,
        started_at=fixed_now - timedelta(seconds=42),
        uptime_seconds=42.0,
    )

    assert dto.name == "Telemetry Hub"
    assert dto.status is ReportingStatus.RECEIVING
    assert dto.uptime_seconds == 42.0
    assert dto.rules.model_dump() == {
        "history_capacity": 14400,
        "high_temperature_threshold": 26.0,
        "low_temperature_threshold": 21.0,
        "label_timezone": "local",
    }
