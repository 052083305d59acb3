"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums, logging setup and numeric formatting helpers used by more
than one layer. Nothing in here may depend on Infrastructure or frameworks
other than the logging stack.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings
from .rounding import format_kilobytes, round_half_up

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
    "format_kilobytes",
    "round_half_up",
]
