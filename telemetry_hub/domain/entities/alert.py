"""Alert value objects derived from the current snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AlertKind(str, Enum):
    """Severity of a derived alert."""

    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class AlertRecord:
    """Alert shown next to the current readings. Never stored."""

    kind: AlertKind
    message: str
