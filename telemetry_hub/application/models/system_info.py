"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by system-related use cases."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    history_capacity: int
    high_temperature_threshold: float
    low_temperature_threshold: float
    label_timezone: Optional[str] = None
