"""A small registry of pausable periodic callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

__all__ = ["MAX_TIMERS", "MIN_INTERVAL_MS", "TimerLimitError", "TimerRegistry"]

MAX_TIMERS = 10
# Intervals shorter than this are raised to it, as the system timer does.
MIN_INTERVAL_MS = 10


class TimerLimitError(RuntimeError):
    """Raised when every timer slot is already in use."""


@dataclass
class _Timer:
    func: Callable[[], None]
    interval: int
    paused: bool = False
    elapsed: float = 0.0


class TimerRegistry:
    """Holds up to ten timers, each firing its callback every interval."""

    def __init__(self):
        self._timers: list[_Timer] = []

    def __len__(self):
        return len(self._timers)

    def _lookup(self, index):
        if 0 <= index < len(self._timers):
            return self._timers[index]
        return None

    def set_timer(self, msec, func):
        """Register ``func`` to run every ``msec`` milliseconds; return its index."""
        if len(self._timers) >= MAX_TIMERS:
            raise TimerLimitError("maximum number of timers already in use")
        interval = max(int(msec), MIN_INTERVAL_MS)
        self._timers.append(_Timer(func, interval))
        return len(self._timers) - 1

    def pause(self, index):
        """Stop a timer from firing; unknown indices are ignored."""
        timer = self._lookup(index)
        if timer is not None:
            timer.paused = True

    def resume(self, index):
        """Let a paused timer fire again; unknown indices are ignored."""
        timer = self._lookup(index)
        if timer is not None:
            timer.paused = False

    def is_paused(self, index):
        timer = self._lookup(index)
        if timer is None:
            raise IndexError(f"no timer with index {index}")
        return timer.paused

    def fire(self, index):
        """Run the timer's callback unless paused; return whether it ran."""
        timer = self._lookup(index)
        if timer is None:
            raise IndexError(f"no timer with index {index}")
        if timer.paused:
            return False
        timer.func()
        return True

    def tick(self, elapsed_ms):
        """Advance all timers by ``elapsed_ms``; return indices fired, in order."""
        fired = []
        for index, timer in enumerate(self._timers):
            timer.elapsed += elapsed_ms
            while timer.elapsed >= timer.interval:
                timer.elapsed -= timer.interval
                if self.fire(index):
                    fired.append(index)
        return fired