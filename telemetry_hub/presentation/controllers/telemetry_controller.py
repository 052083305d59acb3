"""
Telemetry Router - Presentation Layer

Device push endpoint and the dashboard read endpoint. Both share one path;
the method selects the operation.
"""

from typing import Dict

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, status

from telemetry_hub.application.dtos.telemetry_dto import (
    IngestAckDTO,
    TelemetryResponseDTO,
)
from telemetry_hub.application.use_cases.telemetry_use_cases import (
    IngestTelemetryUseCase,
    QueryTelemetryUseCase,
)
from telemetry_hub.domain.entities.errors import MalformedPayloadError
from telemetry_hub.shared import get_logger
from telemetry_hub.shared.consts import INGEST_ERROR_MESSAGE

logger = get_logger(__name__)

router = APIRouter(prefix="/api/iot-data", tags=["Telemetry"])


@router.get("", response_model=TelemetryResponseDTO)
@inject
async def get_telemetry(
    query_telemetry_use_case: QueryTelemetryUseCase = Depends(
        Provide["query_telemetry_use_case"]
    ),
) -> TelemetryResponseDTO:
    """
    Return the latest readings, the full retained history and the alert.

    The whole history (bounded by the configured capacity) is returned on
    every call; there is no pagination.
    """
    try:
        return await query_telemetry_use_case.execute()
    except Exception as exc:  # pragma: no cover
        logger.error("telemetry.query.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from exc


@router.post("", response_model=IngestAckDTO)
@inject
async def ingest_telemetry(
    request: Request,
    ingest_telemetry_use_case: IngestTelemetryUseCase = Depends(
        Provide["ingest_telemetry_use_case"]
    ),
) -> IngestAckDTO:
    """
    Accept a partial telemetry push from the device.

    The body must be a JSON object. Known fields with the wrong type are
    ignored individually; anything that is not a JSON object is rejected
    with 400 and leaves the stored state untouched.
    """
    body = await request.body()
    try:
        return await ingest_telemetry_use_case.execute(body)
    except MalformedPayloadError as exc:
        logger.warning(
            "telemetry.ingest.rejected",
            reason=exc.reason,
            details=exc.details,
            body_size=len(body),
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INGEST_ERROR_MESSAGE,
        ) from exc


@router.options("")
async def telemetry_options() -> Dict[str, str]:
    """Answer plain OPTIONS requests; CORS preflights are handled by middleware."""
    return {}
