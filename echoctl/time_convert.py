"""GPS week/second and calendar date-time structures and conversions."""

from __future__ import annotations

import calendar
import datetime as _dt
import time
from dataclasses import dataclass

# Seconds from 1970-01-01 00:00:00 UTC to 1980-01-06 00:00:00 UTC.
GPS_EPOCH = 315964800
SECONDS_PER_WEEK = 7 * 24 * 3600
GPS_LEAP_SECONDS = 18

_UNIX_EPOCH = _dt.datetime(1970, 1, 1)


@dataclass
class WSM:
    """A GPS time: week number, second in week and millisecond."""

    week: int = 0
    seconds: int = 0
    ms: int = 0

    def is_valid(self) -> bool:
        """A time is valid unless every field is zero."""
        return not (self.week == 0 and self.seconds == 0 and self.ms == 0)


@dataclass(eq=False)
class DateTime:
    """A calendar date and time with millisecond precision.

    Comparisons and subtraction treat the fields as UTC, normalising
    out-of-range values the way ``timegm`` does.
    """

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    ms: int = 0

    @classmethod
    def from_struct_time(cls, t: time.struct_time) -> DateTime:
        """Build a DateTime from a ``time.struct_time``; milliseconds are zero."""
        return cls(t.tm_year, t.tm_mon, t.tm_mday, t.tm_hour, t.tm_min, t.tm_sec, 0)

    def to_struct_time(self) -> time.struct_time:
        """Return the fields as a ``time.struct_time`` (not daylight saving)."""
        try:
            date = _dt.date(self.year, self.month, self.day)
            wday, yday = date.weekday(), date.timetuple().tm_yday
        except ValueError:
            wday, yday = 0, 1
        return time.struct_time(
            (self.year, self.month, self.day, self.hour, self.minute, self.second, wday, yday, 0)
        )

    def _seconds(self) -> int:
        return calendar.timegm(
            (self.year, self.month, self.day, self.hour, self.minute, self.second, 0, 0, 0)
        )

    def timestamp(self) -> float:
        """Seconds since the Unix epoch, reading the fields as UTC."""
        return self._seconds() + self.ms / 1000.0

    def _key(self) -> tuple[int, int]:
        return self._seconds(), self.ms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.ms == other.ms and self._seconds() == other._seconds()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __sub__(self, other: DateTime) -> float:
        """Difference in seconds, milliseconds included."""
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._seconds() + self.ms / 1000.0) - (other._seconds() + other.ms / 1000.0)


def _utc_from_seconds(seconds: int) -> _dt.datetime:
    return _UNIX_EPOCH + _dt.timedelta(seconds=seconds)


def gps_to_local(wsm: WSM, zone: int, leap_sec: int) -> DateTime:
    """Convert GPS week/second to the local time of a UTC offset ``zone`` in hours.

    ``leap_sec`` is the value reported by the GPS receiver (negative).
    """
    total = GPS_EPOCH + wsm.week * SECONDS_PER_WEEK + wsm.seconds + zone * 3600 + leap_sec
    t = _utc_from_seconds(total)
    return DateTime(t.year, t.month, t.day, t.hour, t.minute, t.second, wsm.ms)


def local_to_gps(local: DateTime, zone: int, leap_sec: int) -> WSM:
    """Convert a local time at UTC offset ``zone`` hours to GPS week/second."""
    total = local._seconds() - GPS_EPOCH - zone * 3600 - leap_sec
    week, seconds = divmod(total, SECONDS_PER_WEEK)
    return WSM(week, seconds, local.ms)


def gps_to_utc(wsm: WSM, leap_sec: int) -> DateTime:
    """Convert GPS week/second to UTC."""
    return gps_to_local(wsm, 0, leap_sec)


def utc_to_gps(utc: DateTime, leap_sec: int) -> WSM:
    """Convert a UTC time to GPS week/second."""
    return local_to_gps(utc, 0, leap_sec)


def _atoi(text: str) -> int:
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def convert_bjt_to_utc(date: str) -> str:
    """Convert ``"YYYY-MM-DD HH:MM:SS"`` in the system's local standard time to UTC.

    Raises ValueError if the time cannot be represented.
    """
    fields = (
        _atoi(date),
        _atoi(date[5:]),
        _atoi(date[8:]),
        _atoi(date[11:]),
        _atoi(date[14:]),
        _atoi(date[17:]),
    )
    try:
        stamp = time.mktime(fields + (0, 1, 0))
        t = time.gmtime(stamp)
    except (OverflowError, ValueError, OSError) as exc:
        raise ValueError(f"cannot convert date {date!r}: {exc}") from exc
    return "%04d-%02d-%02d %02d:%02d:%02d" % (
        t.tm_year, t.tm_mon, t.tm_mday, t.tm_hour, t.tm_min, t.tm_sec
    )


def _cdivmod(a: int, b: int) -> tuple[int, int]:
    q = abs(a) // b
    q = q if a >= 0 else -q
    return q, a - q * b


def utc_to_gps_week_seconds(
    year: int, month: int, day: int, hour: int, minute: int, second: float
) -> tuple[int, float]:
    """Return the GPS week and second of week for a UTC time.

    A fixed 18 leap seconds is added.
    """
    days_of_years = sum(366 if calendar.isleap(y) else 365 for y in range(1980, year))
    days_of_months = sum(calendar.monthrange(year, m)[1] for m in range(1, month))
    days = days_of_months + day + days_of_years - 6
    week, day_in_week = _cdivmod(days, 7)
    seconds = day_in_week * 86400 + hour * 3600 + minute * 60 + second + GPS_LEAP_SECONDS
    return week, seconds