"""Frame timer measuring the time between restarts."""

from __future__ import annotations

from typing import Callable

from minigames import util


class Timer:
    """Tracks the time elapsed between the two most recent restarts."""

    def __init__(self, clock: Callable[[], float] = util.clock) -> None:
        self._clock = clock
        self._last = clock()
        self._now = clock()

    def restart(self) -> None:
        self._last = self._now
        self._now = self._clock()

    def delta_time(self) -> float:
        """Seconds between the last two restarts."""
        return util.clock_difference(self._now, self._last)