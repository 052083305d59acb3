"""Domain service deriving threshold alerts from the current temperature."""

from typing import Optional

from telemetry_hub.domain.entities.alert import AlertKind, AlertRecord
from telemetry_hub.domain.entities.errors import InvalidConfigurationError
from telemetry_hub.shared.consts import (
    DEFAULT_HIGH_TEMPERATURE_THRESHOLD,
    DEFAULT_LOW_TEMPERATURE_THRESHOLD,
    HIGH_TEMPERATURE_MESSAGE,
    LOW_TEMPERATURE_MESSAGE,
)


def evaluate_temperature_alert(
    temperature: Optional[float],
    high_threshold: float = DEFAULT_HIGH_TEMPERATURE_THRESHOLD,
    low_threshold: float = DEFAULT_LOW_TEMPERATURE_THRESHOLD,
) -> Optional[AlertRecord]:
    """Return the alert for ``temperature``, or ``None`` when it is in range.

    Both comparisons are strict: a reading exactly on a threshold is in range.
    """
    if temperature is None:
        return None
    if temperature > high_threshold:
        return AlertRecord(kind=AlertKind.WARNING, message=HIGH_TEMPERATURE_MESSAGE)
    if temperature < low_threshold:
        return AlertRecord(kind=AlertKind.INFO, message=LOW_TEMPERATURE_MESSAGE)
    return None


class AlertEvaluator:
    """Holds the configured thresholds so the rule can be injected."""

    def __init__(
        self,
        high_threshold: float = DEFAULT_HIGH_TEMPERATURE_THRESHOLD,
        low_threshold: float = DEFAULT_LOW_TEMPERATURE_THRESHOLD,
    ) -> None:
        if low_threshold > high_threshold:
            raise InvalidConfigurationError(
                "Low temperature threshold must not exceed the high threshold.",
                {"low_threshold": low_threshold, "high_threshold": high_threshold},
            )
        self.high_threshold = high_threshold
        self.low_threshold = low_threshold

    def evaluate(self, temperature: Optional[float]) -> Optional[AlertRecord]:
        return evaluate_temperature_alert(
            temperature,
            high_threshold=self.high_threshold,
            low_threshold=self.low_threshold,
        )
