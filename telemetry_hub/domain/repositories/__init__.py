"""
Repositories Package

Interfaces for state holders. Implementations live in the infrastructure
layer.
"""

from .telemetry_store import ITelemetryStore

__all__ = ["ITelemetryStore"]
