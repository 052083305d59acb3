"""
Presentation Layer Package

HTTP surface of the hub: telemetry, health and info routes.
"""

from telemetry_hub.presentation import controllers

__all__ = ["controllers"]
