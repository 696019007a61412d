"""Growable byte buffer with cheap removal from the front."""

from __future__ import annotations

from typing import Iterable


class OutOfBoundaryError(IndexError):
    """An access fell outside the buffer's content."""


def _round_capacity(size: int) -> int:
    return size + 4 - size % 4


class Buffer:
    """A byte queue backed by a contiguous block of storage."""

    def __init__(self, data: bytes | Iterable[int] | None = None, capacity: int | None = None) -> None:
        content = bytes(data) if data is not None else b""
        if data is None and capacity is None:
            cap = 16
        else:
            cap = _round_capacity(max(len(content), capacity or 0))
        self._buf = bytearray(cap)
        self._buf[: len(content)] = content
        self._pos = 0
        self._count = len(content)

    def clear(self) -> None:
        """Drop all content, keeping the storage."""
        self._count = 0
        self._pos = 0

    def recapacity(self, size: int) -> None:
        """Reallocate storage for ``size`` bytes, truncating content if needed."""
        if size <= 1:
            return
        cap = _round_capacity(size)
        kept = min(size, self._count)
        new_buf = bytearray(cap)
        new_buf[:kept] = self._buf[self._pos : self._pos + kept]
        self._buf = new_buf
        self._pos = 0
        self._count = kept

    def reserve(self, count: int) -> None:
        """Make sure ``count`` more bytes can be appended without reallocation."""
        front = self._pos
        behind = len(self._buf) - self._pos - self._count
        if behind >= count:
            return
        if front + behind >= count:
            if self._count > 0:
                if front >= self._count:
                    self._buf[: self._count] = self._buf[self._pos : self._pos + self._count]
                else:
                    self.recapacity(count + self._count * 2)
            self._pos = 0
        else:
            self.recapacity(count + self._count * 2)

    def resize(self, size: int) -> None:
        """Set the content length; new bytes are zero."""
        if size < 0:
            raise ValueError(f"negative size: {size}")
        if self._count < size:
            self.reserve(size - self._count)
            start = self._pos + self._count
            self._buf[start : self._pos + size] = bytes(size - self._count)
        self._count = size

    def swap(self, other: Buffer) -> None:
        """Exchange contents and storage with another buffer."""
        if other is self:
            return
        self._buf, other._buf = other._buf, self._buf
        self._pos, other._pos = other._pos, self._pos
        self._count, other._count = other._count, self._count

    def capacity(self) -> int:
        return len(self._buf)

    def __len__(self) -> int:
        return self._count

    def front(self) -> int:
        """Return the first byte."""
        if self._count == 0:
            raise OutOfBoundaryError("Buffer.front(): buffer is empty")
        return self._buf[self._pos]

    def back(self) -> int:
        """Return the last byte."""
        if self._count == 0:
            raise OutOfBoundaryError("Buffer.back(): buffer is empty")
        return self._buf[self._pos + self._count - 1]

    def _offset(self, index: int) -> int:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise OutOfBoundaryError(f"Buffer index {index} out of range (size {self._count})")
        return self._pos + index

    def __getitem__(self, index: int | slice) -> int | bytes:
        if isinstance(index, slice):
            return bytes(self)[index]
        return self._buf[self._offset(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._buf[self._offset(index)] = value

    def __bytes__(self) -> bytes:
        return bytes(self._buf[self._pos : self._pos + self._count])

    def __repr__(self) -> str:
        return f"Buffer({bytes(self)!r}, capacity={self.capacity()})"

    def pop_front(self, n: int | None = None) -> int | bytes:
        """Remove and return the first byte, or the first ``n`` bytes."""
        if n is None:
            if self._count == 0:
                raise OutOfBoundaryError("Buffer.pop_front(): buffer is empty")
            value = self._buf[self._pos]
            if self._count > 1:
                self._pos += 1
                self._count -= 1
            else:
                self.clear()
            return value
        if n < 0 or self._count < n:
            raise OutOfBoundaryError(f"Buffer.pop_front(): cannot remove {n} of {self._count} bytes")
        removed = bytes(self._buf[self._pos : self._pos + n])
        if self._count > n:
            self._pos += n
            self._count -= n
        else:
            self.clear()
        return removed

    def pop_back(self, n: int | None = None) -> int | bytes:
        """Remove and return the last byte, or the last ``n`` bytes."""
        if n is None:
            if self._count == 0:
                raise OutOfBoundaryError("Buffer.pop_back(): buffer is empty")
            value = self._buf[self._pos + self._count - 1]
            if self._count > 1:
                self._count -= 1
            else:
                self.clear()
            return value
        if n < 0 or self._count < n:
            raise OutOfBoundaryError(f"Buffer.pop_back(): cannot remove {n} of {self._count} bytes")
        end = self._pos + self._count
        removed = bytes(self._buf[end - n : end])
        self._count -= n
        return removed

    def push_back(self, data: int | bytes | Iterable[int]) -> None:
        """Append a single byte or a sequence of bytes."""
        if isinstance(data, int):
            if not 0 <= data <= 0xFF:
                raise ValueError(f"byte out of range: {data}")
            self.reserve(1)
            self._buf[self._pos + self._count] = data
            self._count += 1
            return
        chunk = bytes(data)
        self.reserve(len(chunk))
        start = self._pos + self._count
        self._buf[start : start + len(chunk)] = chunk
        self._count += len(chunk)