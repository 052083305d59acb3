"""Latest-value cache for the device's measured fields."""

from __future__ import annotations

from typing import Optional

from telemetry_hub.domain.entities.telemetry import SnapshotState, TelemetryPatch


class SnapshotStore:
    """
    Pass-through cache of the latest reading per field.

    No range validation is performed. Not synchronised on its own; callers
    sharing it across threads must hold the owning store's lock.
    """

    def __init__(self, initial: Optional[SnapshotState] = None) -> None:
        self._state = initial if initial is not None else SnapshotState()

    def merge(self, patch: TelemetryPatch) -> SnapshotState:
        """Overwrite the fields present in ``patch`` and return the new state."""
        self._state = self._state.merged(patch)
        return self._state

    def read(self) -> SnapshotState:
        # SnapshotState is frozen, handing out the reference is safe.
        return self._state
