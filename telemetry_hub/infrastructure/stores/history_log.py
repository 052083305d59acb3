"""Bounded, oldest-first-evicting log of history samples."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Tuple

from telemetry_hub.domain.entities.errors import InvalidConfigurationError
from telemetry_hub.domain.entities.telemetry import HistorySample
from telemetry_hub.shared.consts import DEFAULT_HISTORY_CAPACITY


class HistoryLog:
    """
    Sliding window over the most recent ``capacity`` samples.

    Backed by a ``deque`` with ``maxlen`` so append-and-evict is O(1) and the
    length never exceeds the capacity, not even between the append and the
    eviction. Not synchronised on its own.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidConfigurationError(
                "History capacity must be a positive integer.",
                {"capacity": capacity},
            )
        self._capacity = capacity
        self._samples: Deque[HistorySample] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._samples) == self.capacity

    def append(self, sample: HistorySample) -> int:
        """Add ``sample`` at the tail, evicting the oldest entry when full."""
        self._samples.append(sample)
        return len(self._samples)

    def extend(self, samples: Iterable[HistorySample]) -> int:
        """Append a burst of samples; only the newest ``capacity`` survive."""
        self._samples.extend(samples)
        return len(self._samples)

    def read_all(self) -> Tuple[HistorySample, ...]:
        """Return the retained samples, oldest first."""
        return tuple(self._samples)

    def __len__(self) -> int:
        return len(self._samples)
