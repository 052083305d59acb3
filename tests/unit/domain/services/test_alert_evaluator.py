from __future__ import annotations

import pytest

from telemetry_hub.domain.entities.alert import AlertKind
from telemetry_hub.domain.entities.errors import InvalidConfigurationError
from telemetry_hub.domain.services.alert_evaluator import (
    AlertEvaluator,
    evaluate_temperature_alert,
)


@pytest.mark.parametrize("temperature", [21.0, 23.5, 26.0])
def test_no_alert_inside_range_including_thresholds(temperature: float) -> None:
    assert evaluate_temperature_alert(temperature) is None


def test_warning_above_high_threshold() -> None:
    alert = evaluate_temperature_alert(26.01)

    assert alert is not None
    assert alert.kind is AlertKind.WARNING
    assert alert.message == "High temperature detected!"


def test_info_below_low_threshold() -> None:
    alert = evaluate_temperature_alert(20.99)

    assert alert is not None
    assert alert.kind is AlertKind.INFO
    assert alert.message == "Temperature is a bit low."


def test_missing_temperature_yields_no_alert() -> None:
    assert evaluate_temperature_alert(None) is None


def test_evaluator_uses_configured_thresholds() -> None:
    evaluator = AlertEvaluator(high_threshold=30.0, low_threshold=10.0)

    assert evaluator.evaluate(27.0) is None
    assert evaluator.evaluate(30.5).kind is AlertKind.WARNING
    assert evaluator.evaluate(9.9).kind is AlertKind.INFO


def test_evaluator_allows_equal_thresholds() -> None:
    evaluator = AlertEvaluator(high_threshold=22.0, low_threshold=22.0)

    assert evaluator.evaluate(22.0) is None


def test_evaluator_rejects_inverted_thresholds() -> None:
    with pytest.raises(InvalidConfigurationError) as exc_info:
        AlertEvaluator(high_threshold=20.0, low_threshold=25.0)

    assert exc_info.value.details == {"low_threshold": 25.0, "high_threshold": 20.0}
