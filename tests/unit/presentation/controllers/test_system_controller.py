from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi import Request

from telemetry_hub.application.models import SystemInfo
from telemetry_hub.application.use_cases.health_use_cases import (
    GetHubInfoUseCase,
    GetStoreHealthUseCase,
)
from telemetry_hub.domain.entities.health import ReportingStatus
from telemetry_hub.presentation.controllers.system_controller import (
    get_hub_info,
    get_store_health,
)


@pytest.mark.asyncio
async def test_health_endpoint_returns_status(telemetry_store) -> None:
    dto = await get_store_health(
        get_store_health_use_case=GetStoreHealthUseCase(telemetry_store)
    )
    assert dto.status is ReportingStatus.WAITING
    assert dto.store.ingest_count == 0


@pytest.mark.asyncio
async def test_info_endpoint_returns_application_info(telemetry_store) -> None:
    system_info = SystemInfo(
        title="Telemetry Hub",
        description="desc",
        version="1.0",
        environment="dev",
        git_commit="abc",
        build_time="now",
        history_capacity=14400,
        high_temperature_threshold=26.0,
        low_temperature_threshold=21.0,
    )
    info_use_case = GetHubInfoUseCase(telemetry_store, system_info)

    scope = {
        "type": "http",
        "method": "GET",
        "path": "/info",
        "headers": [],
        "query_string": b"",
        "server": ("test", 80),
        "app": SimpleNamespace(
            state=SimpleNamespace(started_at=datetime.now(timezone.utc))
        ),
    }
    request = Request(scope)

    dto = await get_hub_info(request=request, get_hub_info_use_case=info_use_case)
    assert dto.name == "Telemetry Hub"
    assert dto.rules.history_capacity == 14400
