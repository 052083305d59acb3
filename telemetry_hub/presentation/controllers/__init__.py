"""
Controllers Package - Presentation Layer

FastAPI routers translating HTTP requests into use case calls and domain
errors into HTTP status codes.
"""

from .system_controller import router as system_router
from .telemetry_controller import router as telemetry_router

__all__ = ["telemetry_router", "system_router"]
