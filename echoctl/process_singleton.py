"""Detect whether another process already holds a named lock file."""

from __future__ import annotations

import errno
import os
import tempfile

try:
    import fcntl
except ImportError:  # Windows
    fcntl = None
    import msvcrt

_BUSY_ERRNOS = {errno.EACCES, errno.EAGAIN, errno.EDEADLK}


def _lock(fd: int) -> None:
    if fcntl is not None:
        fcntl.lockf(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
    else:
        msvcrt.locking(fd, msvcrt.LK_NBLCK, 1)


class ProcessSingleton:
    """Holds an exclusive lock on a file named after the application.

    ``good`` tells whether the check could be made at all; ``existed`` tells
    whether another process already holds the lock.
    """

    def __init__(self, name: str, directory: str | os.PathLike | None = None) -> None:
        base = os.fspath(directory) if directory is not None else tempfile.gettempdir()
        self.name = name
        self.path = os.path.join(base, name)
        self._good = False
        self._existed = False
        self._fd: int | None = None
        try:
            self._fd = os.open(self.path, os.O_WRONLY | os.O_CREAT, 0o644)
        except OSError:
            return
        try:
            _lock(self._fd)
        except OSError as exc:
            if isinstance(exc, BlockingIOError) or exc.errno in _BUSY_ERRNOS:
                self._good = True
                self._existed = True
        else:
            self._good = True
            self._existed = False

    @property
    def good(self) -> bool:
        return self._good

    @property
    def existed(self) -> bool:
        return self._existed

    def close(self) -> None:
        """Release the lock file."""
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def __enter__(self) -> ProcessSingleton:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()