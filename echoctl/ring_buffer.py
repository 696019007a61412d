"""Thread-safe fixed-size byte ring."""

from __future__ import annotations

import threading


class RingBuffer:
    """A circular byte store; one slot is kept free to tell full from empty."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"ring size must be positive: {size}")
        self._buffer = bytearray(size)
        self._capacity = size
        self._head = 0
        self._tail = 0
        self._lock = threading.Lock()

    def write(self, data: bytes) -> int:
        """Store as much of ``data`` as fits; return the number of bytes written."""
        with self._lock:
            space = (self._capacity + self._tail - self._head - 1) % self._capacity
            chunk = bytes(data[:space])
            for byte in chunk:
                self._buffer[self._head] = byte
                self._head = (self._head + 1) % self._capacity
            return len(chunk)

    def read(self, size: int) -> bytes:
        """Remove and return up to ``size`` bytes."""
        with self._lock:
            count = (self._capacity + self._head - self._tail) % self._capacity
            size = max(0, min(size, count))
            out = bytearray()
            for _ in range(size):
                out.append(self._buffer[self._tail])
                self._tail = (self._tail + 1) % self._capacity
            return bytes(out)

    def available(self) -> int:
        """Return the number of bytes waiting to be read."""
        with self._lock:
            return (self._capacity + self._head - self._tail) % self._capacity