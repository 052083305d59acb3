"""Domain services package."""

from .alert_evaluator import AlertEvaluator, evaluate_temperature_alert

__all__ = ["AlertEvaluator", "evaluate_temperature_alert"]
