"""Timing values for game updates and rendering."""

from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

MAX_FRAME_GAP = 0.2
"""Frame gaps longer than this many seconds are not counted as elapsed time."""


class GameTime:
    """Tracks total running time and the time elapsed since the last frame."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._previous_total_time = clock()
        self._current_total_time = clock()
        self._elapsed_time = 0.0

    def update(self) -> None:
        """Advance the timing values to the clock's current reading."""
        self._previous_total_time = self._current_total_time
        self._current_total_time = self._clock()
        gap = self._current_total_time - self._previous_total_time
        if gap <= MAX_FRAME_GAP:
            self._elapsed_time = gap
        else:
            logger.warning("Hopefully you were debugging!")

    @property
    def elapsed_time(self) -> float:
        """Seconds since the last frame."""
        return self._elapsed_time

    @property
    def total_time(self) -> float:
        """Clock reading at the most recent update, in seconds."""
        return self._current_total_time