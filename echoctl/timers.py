"""Stopwatches measured on a monotonic clock."""

from __future__ import annotations

import time


class ElapsedTimer:
    """Measures time since it was last started."""

    def __init__(self) -> None:
        self._start_ns = time.monotonic_ns()

    def start(self) -> None:
        self._start_ns = time.monotonic_ns()

    def restart(self) -> int:
        """Start again and return the milliseconds elapsed before."""
        elapsed = self.elapsed()
        self._start_ns = time.monotonic_ns()
        return elapsed

    def elapsed(self) -> int:
        """Milliseconds since start."""
        return (time.monotonic_ns() - self._start_ns) // 1_000_000

    def uelapsed(self) -> int:
        """Microseconds since start."""
        return (time.monotonic_ns() - self._start_ns) // 1_000


class Timer:
    """A stopwatch that keeps its reading once stopped."""

    def __init__(self) -> None:
        self._running = False
        self._time_us = 0
        self._et = ElapsedTimer()

    def is_running(self) -> bool:
        return self._running

    def elapsed(self) -> int:
        """Milliseconds measured so far."""
        return self._et.elapsed() if self._running else self._time_us // 1000

    def uelapsed(self) -> int:
        """Microseconds measured so far."""
        return self._et.uelapsed() if self._running else self._time_us

    def reset(self) -> None:
        self._time_us = 0
        self._running = False

    def start(self) -> None:
        self._time_us = 0
        self._et.start()
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._time_us = self._et.uelapsed()
            self._running = False