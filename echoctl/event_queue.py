"""Counting semaphore, events and a thread-safe event queue."""

from __future__ import annotations

import sys
import threading
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Semaphore:
    """A counting semaphore whose waits may time out."""

    def __init__(self, initial: int = 0) -> None:
        if initial < 0:
            raise ValueError(f"initial count must not be negative: {initial}")
        self._count = initial
        self._cond = threading.Condition(threading.Lock())

    def notify(self) -> None:
        """Increase the count and wake one waiter."""
        with self._cond:
            self._count += 1
            self._cond.notify()

    def wait(self, timeout: float | None = None) -> bool:
        """Wait until the count is positive, then decrease it.

        Returns False if ``timeout`` seconds pass first.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: self._count != 0, timeout):
                return False
            self._count -= 1
            return True

    def try_wait(self) -> bool:
        """Decrease the count if it is positive, without blocking."""
        with self._cond:
            if self._count:
                self._count -= 1
                return True
            return False


class EventId(IntEnum):
    """Reserved event identifiers; user events start at USER."""

    QUIT = 0
    TEST = 1
    MAX = 511
    USER = 512


@dataclass(eq=False)
class Event:
    """An event identified by number, optionally carrying data."""

    event_id: int
    data: Any = None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Event):
            return self.event_id == other.event_id and self.data == other.data
        if isinstance(other, int):
            return self.event_id == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


class EventQueue:
    """A FIFO of events that consumers can block on."""

    def __init__(self, max_size: int | None = None) -> None:
        self._max_size = sys.maxsize if max_size is None else max_size
        self._events: deque[Event] = deque()
        self._lock = threading.RLock()
        self._sem = Semaphore()

    def post(self, event: Event | int | None) -> bool:
        """Append an event (or an event id); return False if it was dropped."""
        if event is None:
            return False
        if not isinstance(event, Event):
            event = Event(int(event))
        with self._lock:
            if len(self._events) >= self._max_size:
                return False
            self._events.append(event)
            self._sem.notify()
        return True

    def peek(self) -> Event | None:
        """Return the first event without removing it, or None if empty."""
        with self._lock:
            return self._events[0] if self._events else None

    def pop(self, timeout: float | None = None) -> Event | None:
        """Remove and return the first event, waiting for one if needed.

        Returns None if ``timeout`` seconds pass with nothing queued.
        """
        if not self._sem.wait(timeout):
            return None
        with self._lock:
            return self._events.popleft()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def max_size(self) -> int:
        """Return the most events the queue will hold."""
        return self._max_size