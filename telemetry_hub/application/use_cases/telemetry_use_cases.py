"""
Telemetry Use Cases - Application Layer

Ingestion (the only mutator of process state) and the combined read
served to dashboards.
"""

import json
from datetime import tzinfo
from typing import Any, Dict, Optional, Union
from zoneinfo import ZoneInfo

from telemetry_hub.application.dtos.telemetry_dto import (
    AlertDTO,
    CurrentReadingsDTO,
    HistoryEntryDTO,
    IngestAckDTO,
    TelemetryResponseDTO,
)
from telemetry_hub.domain.entities.errors import MalformedPayloadError
from telemetry_hub.domain.entities.telemetry import TelemetryPatch
from telemetry_hub.domain.repositories.telemetry_store import ITelemetryStore
from telemetry_hub.domain.services.alert_evaluator import AlertEvaluator
from telemetry_hub.shared import get_logger
from telemetry_hub.shared.clock import Clock, utc_now

logger = get_logger(__name__)


def decode_payload(body: Union[bytes, str]) -> Dict[str, Any]:
    """
    Decode a request body into a JSON object.

    Raises:
        MalformedPayloadError: If the body is not valid UTF-8 JSON, cannot be
            parsed within the interpreter limits, or the top-level value is
            not an object.
    """
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as exc:
        # ValueError: bad UTF-8, bad syntax, integers past the digit limit.
        # RecursionError: nesting deeper than the decoder can follow.
        raise MalformedPayloadError(
            "body is not valid JSON", {"error": str(exc)}
        ) from exc

    if not isinstance(payload, dict):
        raise MalformedPayloadError(
            "top-level JSON value must be an object",
            {"received_type": type(payload).__name__},
        )
    return payload


class IngestTelemetryUseCase:
    """Apply one device push to the telemetry store."""

    def __init__(
        self,
        telemetry_store: ITelemetryStore,
        clock: Clock = utc_now,
    ) -> None:
        self._telemetry_store = telemetry_store
        self._clock = clock

    async def execute(self, body: Union[bytes, str]) -> IngestAckDTO:
        """
        Decode ``body``, merge the known fields and record a history sample.

        Fields with the wrong type are skipped, the rest of the payload is
        still applied. A sample is appended on every accepted call as long as
        the snapshot holds numeric temperature and humidity, even when the
        payload itself carried neither.

        Raises:
            MalformedPayloadError: If the body is not a JSON object. The store
                is left untouched.
        """
        payload = decode_payload(body)
        patch = TelemetryPatch.from_mapping(payload)

        if patch.rejected_keys:
            logger.debug(
                "telemetry.ingest.fields_ignored",
                keys=list(patch.rejected_keys),
            )
        if patch.is_empty:
            # Nothing to merge; the current snapshot is still sampled.
            logger.debug("telemetry.ingest.empty_patch", payload_keys=len(payload))

        outcome = self._telemetry_store.ingest(patch, self._clock())

        logger.info(
            "telemetry.ingest.accepted",
            received_keys=sorted(payload.keys()),
            sampled=outcome.sample is not None,
            history_size=outcome.history_size,
        )
        return IngestAckDTO()


class QueryTelemetryUseCase:
    """Assemble current readings, full history and the alert verdict."""

    def __init__(
        self,
        telemetry_store: ITelemetryStore,
        alert_evaluator: AlertEvaluator,
        label_timezone: Optional[str] = None,
        clock: Clock = utc_now,
    ) -> None:
        self._telemetry_store = telemetry_store
        self._alert_evaluator = alert_evaluator
        self._label_timezone: Optional[tzinfo] = (
            ZoneInfo(label_timezone) if label_timezone else None
        )
        self._clock = clock

    async def execute(self) -> TelemetryResponseDTO:
        view = self._telemetry_store.read()

        # Thresholds apply to the raw reading, not the one-decimal display value.
        alert = self._alert_evaluator.evaluate(view.snapshot.temperature)

        response = TelemetryResponseDTO(
            current=CurrentReadingsDTO.from_domain(view.snapshot, self._clock()),
            history=[
                HistoryEntryDTO.from_domain(sample, self._label_timezone)
                for sample in view.history
            ],
            alert=AlertDTO.from_domain(alert) if alert is not None else None,
        )

        logger.debug(
            "telemetry.query.served",
            history_size=len(view.history),
            alert=alert.kind.value if alert is not None else None,
        )
        return response
