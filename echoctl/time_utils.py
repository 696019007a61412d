"""Clock access, sleeping and formatting of date-times."""

from __future__ import annotations

import subprocess
import sys
import time

from echoctl.time_convert import DateTime


def msleep(ms: int) -> None:
    """Sleep for ``ms`` milliseconds."""
    time.sleep(ms / 1000.0)


def cpu_counter() -> int:
    """A monotonic counter in ticks of :func:`cpu_frequency`."""
    return time.monotonic_ns()


def cpu_frequency() -> int:
    """Ticks per second of :func:`cpu_counter`."""
    return 1_000_000_000


def now(timezone: float | None = None) -> DateTime:
    """The current time: local time, or UTC shifted by ``timezone`` whole hours."""
    ns = time.time_ns()
    secs = ns // 1_000_000_000
    if timezone is None:
        t = time.localtime(secs)
    else:
        t = time.gmtime(secs + int(timezone) * 3600)
    dt = DateTime.from_struct_time(t)
    dt.ms = (ns // 1_000_000) % 1000
    return dt


def set_system_time(dt: DateTime) -> None:
    """Set the system clock to the UTC time ``dt`` and save it to the hardware clock.

    Raises OSError if the clock cannot be set.
    """
    if not hasattr(time, "clock_settime") or sys.platform == "win32":
        raise OSError("setting the system clock is not supported on this platform")
    time.clock_settime(time.CLOCK_REALTIME, dt.timestamp())
    try:
        subprocess.run(["hwclock", "-w"], check=False)
    except OSError:
        pass


def _as_struct_time(t: DateTime | time.struct_time) -> time.struct_time:
    return t.to_struct_time() if isinstance(t, DateTime) else t


def string_time(t: DateTime | time.struct_time, fmt: str) -> str:
    """Format a date-time with ``strftime`` directives."""
    return time.strftime(fmt, _as_struct_time(t))


def string_ptime(s: str, fmt: str) -> DateTime:
    """Parse ``s`` with ``strptime`` directives; raises ValueError on mismatch."""
    return DateTime.from_struct_time(time.strptime(s, fmt))


def string_now(fmt: str, timezone: float | None = None) -> str:
    """Format the current time (see :func:`now`)."""
    return string_time(now(timezone), fmt)