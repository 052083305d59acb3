"""
Domain Errors

Exceptions raised by the telemetry domain. Ingestion failures are local to
one call and never leave the store partially updated.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MalformedPayloadError(DomainError):
    """Raised when an ingestion body cannot be read as a JSON object."""

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Malformed telemetry payload: {reason}", details)
        self.reason = reason


class InvalidConfigurationError(DomainError):
    """Raised when the store or alert rules are built with invalid parameters."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
