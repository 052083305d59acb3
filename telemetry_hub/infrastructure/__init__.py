"""
Infrastructure Layer Package

Implementation of the domain store contract: the in-memory telemetry
store and the state holders it is built from.
"""

from telemetry_hub.infrastructure import stores

__all__ = ["stores"]
