"""
Domain Layer Package

Telemetry entities, the alert rule and the store contract. Free of web
framework and infrastructure dependencies.
"""

from telemetry_hub.domain import entities, repositories, services

__all__ = ["entities", "repositories", "services"]
