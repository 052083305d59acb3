"""Operational endpoints: store health and build info."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request

from telemetry_hub.application.dtos.health_dto import HubInfoDTO, StoreHealthDTO
from telemetry_hub.application.use_cases.health_use_cases import (
    GetHubInfoUseCase,
    GetStoreHealthUseCase,
)
from telemetry_hub.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=StoreHealthDTO)
@inject
async def get_store_health(
    get_store_health_use_case: GetStoreHealthUseCase = Depends(
        Provide["get_store_health_use_case"]
    ),
) -> StoreHealthDTO:
    """
    Report whether the device has pushed data since start-up.

    Always 200: a hub that is still waiting for its first push is healthy.
    """
    health = await get_store_health_use_case.execute()
    logger.debug(
        "health.checked",
        status=health.status.value,
        ingest_count=health.store.ingest_count,
    )
    return health


@router.get("/info", response_model=HubInfoDTO)
@inject
async def get_hub_info(
    request: Request,
    get_hub_info_use_case: GetHubInfoUseCase = Depends(
        Provide["get_hub_info_use_case"]
    ),
) -> HubInfoDTO:
    """Return build metadata, uptime and the effective alert rules."""
    started_at = getattr(request.app.state, "started_at", None)
    return await get_hub_info_use_case.execute(started_at)
