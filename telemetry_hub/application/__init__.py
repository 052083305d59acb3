"""
Application Layer Package

Use cases and DTOs. Orchestrates the domain store contract and alert rule
to serve the ingestion and query operations.
"""

from telemetry_hub.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
