"""Core data model: EasyTime, TimeRange, and tolerant comparisons.

`EasyTime` values are like aware datetimes, except:

- they auto-convert most time values, including strings, to datetimes
- they compare with a configurable tolerance

Timestamps from different systems (a database row and the object it was
uploaded to, say) rarely agree to the second. With a tolerance, two times
whose difference is at most ``tolerance`` seconds are the "same", and only
larger differences make one "newer" or "older" than the other. Keep the
tolerance small: too large a value creates false equivalences.

The tolerance used by a comparison is, in order: the one passed to the
call, the one set on the EasyTime value, then the process-wide default
(one minute, see :mod:`easytime.config`).
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Union

from easytime._constants import (
    FORMAT_HTTPDATE,
    FORMAT_ISO8601,
    FORMAT_RFC2822,
    FORMAT_XMLSCHEMA,
)
from easytime._duration import to_seconds
from easytime.config import get_comparison_tolerance
from easytime.convert import DURATION_TYPES, Duration, convert, now
from easytime.errors import EasyTimeConfigError, unknown_type_error
from easytime.formats import format_instant, parse_string

TimeValue = Union[
    str, datetime, date, "EasyTime", timedelta, Duration, int, float, list, tuple, None
]
ToleranceLike = Union[int, float, str, timedelta]


@dataclass(frozen=True)
class TimeRange:
    """An inclusive range of time values, for :func:`between`.

    Args:
        start: The minimum time value.
        end: The maximum time value.
    """

    start: Any
    end: Any

    def bounds(self) -> tuple[Any, Any]:
        return self.start, self.end


def _range_bounds(value: TimeRange | range) -> tuple[Any, Any]:
    """Extract (min, max) from a TimeRange or a range of epoch seconds."""
    if isinstance(value, TimeRange):
        return value.bounds()
    if not value:
        raise EasyTimeConfigError(f"Cannot test membership in empty {value!r}.")
    return min(value), max(value)


def _as_duration(value: Any) -> Duration:
    """Durations pass through; numbers are seconds."""
    if isinstance(value, DURATION_TYPES):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return timedelta(seconds=value)
    raise unknown_type_error(value)


class EasyTime:
    """An aware datetime with auto-conversion and tolerant comparisons.

    Args:
        *value: Any convertible time value. Several positional values are
            taken as components: ``EasyTime(2014, 5, 15, 9, 12, 19, "-05:00")``.
            No value means now.
        tolerance: Comparison tolerance for this value, in seconds (or a
            timedelta, or a duration string like ``"5s"``).

    Example::

        t1 = EasyTime("2020-10-09T08:07:06-05:00")
        t1.with_tolerance(2) <= "Fri, 09 Oct 2020 13:07:07 GMT"   # True
    """

    __slots__ = ("_time", "_tolerance")
    __hash__ = None  # tolerant equality is not transitive

    _time: datetime
    _tolerance: int | None

    def __init__(self, *value: TimeValue, tolerance: ToleranceLike | None = None):
        if len(value) > 1:
            self._time = convert(value)
        else:
            self._time = convert(value[0] if value else None)
        self._tolerance = None if tolerance is None else to_seconds(tolerance)

    @classmethod
    def now(cls, tolerance: ToleranceLike | None = None) -> EasyTime:
        return cls(now(), tolerance=tolerance)

    @classmethod
    def parse(cls, text: str, tolerance: ToleranceLike | None = None) -> EasyTime:
        """Parse a time string in any of the known formats."""
        if not isinstance(text, str):
            raise unknown_type_error(text)
        return cls(parse_string(text), tolerance=tolerance)

    @classmethod
    def at(cls, seconds: int | float, tolerance: ToleranceLike | None = None) -> EasyTime:
        """The instant ``seconds`` after the Epoch."""
        return cls(seconds, tolerance=tolerance)

    def _derive(self, time: datetime | None = None, **changes: Any) -> EasyTime:
        clone = copy.copy(self)
        if time is not None:
            clone._time = time
        if "tolerance" in changes:
            clone._tolerance = changes["tolerance"]
        return clone

    # -- tolerance ---------------------------------------------------------

    @property
    def time(self) -> datetime:
        """The wrapped aware datetime."""
        return self._time

    @property
    def tolerance(self) -> int | None:
        """The tolerance set on this value, or None."""
        return self._tolerance

    @property
    def comparison_tolerance(self) -> int:
        """The tolerance this value compares with, in seconds."""
        if self._tolerance is not None:
            return self._tolerance
        return get_comparison_tolerance()

    def with_tolerance(self, value: ToleranceLike | None) -> EasyTime:
        """Return a new EasyTime with the tolerance set to ``value``.

        ``None`` falls back to the process-wide default again.
        """
        return self._derive(tolerance=None if value is None else to_seconds(value))

    # -- comparisons -------------------------------------------------------

    def compare(self, other: TimeValue, tolerance: ToleranceLike | None = None) -> int:
        """Compare with another time value: -1, 0 or 1.

        Times whose difference, truncated to whole seconds, is within the
        tolerance compare as 0. Otherwise the instants are ordered strictly.
        """
        limit = self.comparison_tolerance if tolerance is None else to_seconds(tolerance)
        other_time = convert(other)
        diff = self._time - other_time
        if abs(int(diff.total_seconds())) <= limit:
            return 0
        return -1 if self._time < other_time else 1

    def newer(self, other: TimeValue, tolerance: ToleranceLike | None = None) -> bool:
        return self.compare(other, tolerance) > 0

    def older(self, other: TimeValue, tolerance: ToleranceLike | None = None) -> bool:
        return self.compare(other, tolerance) < 0

    def same(self, other: TimeValue, tolerance: ToleranceLike | None = None) -> bool:
        return self.compare(other, tolerance) == 0

    def different(
        self, other: TimeValue, tolerance: ToleranceLike | None = None
    ) -> bool:
        return not self.same(other, tolerance)

    def between(
        self,
        t_min: TimeValue | TimeRange | range,
        t_max: TimeValue = None,
        tolerance: ToleranceLike | None = None,
    ) -> bool:
        """True if ``t_min <= self <= t_max`` using tolerant comparisons.

        ``t_min`` may instead be a TimeRange (or a range of epoch seconds),
        in which case ``t_max`` is omitted.
        """
        if isinstance(t_min, (TimeRange, range)):
            t_min, t_max = _range_bounds(t_min)
        elif t_max is None:
            raise EasyTimeConfigError(
                "between() needs both t_min and t_max, or a TimeRange."
            )
        return (
            self.compare(t_min, tolerance) >= 0
            and self.compare(t_max, tolerance) <= 0
        )

    def __lt__(self, other: TimeValue) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: TimeValue) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: TimeValue) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: TimeValue) -> bool:
        return self.compare(other) >= 0

    def __eq__(self, other: object) -> bool:
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        return self.compare(other) != 0

    # -- arithmetic --------------------------------------------------------

    def __add__(self, duration: Duration | int | float) -> EasyTime:
        return self._derive(time=self._time + _as_duration(duration))

    __radd__ = __add__

    def __sub__(self, other: TimeValue) -> EasyTime | timedelta:
        """Subtract a duration (giving an EasyTime) or a time (giving a timedelta).

        Numbers are taken as seconds.
        """
        operand = convert(other, coerce=False)
        if isinstance(operand, datetime):
            return self._time - operand
        return self._derive(time=self._time - _as_duration(operand))

    def __rsub__(self, other: TimeValue) -> timedelta:
        operand = convert(other, coerce=False)
        if not isinstance(operand, datetime):
            return NotImplemented
        return operand - self._time

    # -- datetime adapter --------------------------------------------------

    @property
    def year(self) -> int:
        return self._time.year

    @property
    def month(self) -> int:
        return self._time.month

    @property
    def day(self) -> int:
        return self._time.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def microsecond(self) -> int:
        return self._time.microsecond

    @property
    def tzinfo(self) -> tzinfo | None:
        return self._time.tzinfo

    def utcoffset(self) -> timedelta | None:
        return self._time.utcoffset()

    def timestamp(self) -> float:
        return self._time.timestamp()

    def to_datetime(self) -> datetime:
        return self._time

    def astimezone(self, tz: tzinfo | None = None) -> EasyTime:
        """The same instant in another zone (local zone by default)."""
        return self._derive(time=self._time.astimezone(tz))

    def utc(self) -> EasyTime:
        return self.astimezone(timezone.utc)

    def strftime(self, fmt: str) -> str:
        return self._time.strftime(fmt)

    def isoformat(self, sep: str = "T", timespec: str = "auto") -> str:
        return self._time.isoformat(sep, timespec)

    def iso8601(self) -> str:
        return format_instant(self._time, FORMAT_ISO8601)

    def xmlschema(self) -> str:
        return format_instant(self._time, FORMAT_XMLSCHEMA)

    def rfc2822(self) -> str:
        return format_instant(self._time, FORMAT_RFC2822)

    def httpdate(self) -> str:
        return format_instant(self._time, FORMAT_HTTPDATE)

    def __format__(self, fmt: str) -> str:
        return format(self._time, fmt) if fmt else str(self)

    def __str__(self) -> str:
        return self._time.isoformat()

    def __repr__(self) -> str:
        if self._tolerance is None:
            return f"EasyTime('{self._time.isoformat()}')"
        return f"EasyTime('{self._time.isoformat()}', tolerance={self._tolerance})"


def easy_time(value: TimeValue = None, tolerance: ToleranceLike | None = None) -> EasyTime:
    """Convert any supported time value to an EasyTime."""
    return EasyTime(value, tolerance=tolerance)


def parse(text: str, tolerance: ToleranceLike | None = None) -> EasyTime:
    """Parse a time string in any of the known formats into an EasyTime."""
    return EasyTime.parse(text, tolerance=tolerance)


def _wrap(value: TimeValue, tolerance: ToleranceLike | None = None) -> EasyTime:
    """EasyTime values keep their own tolerance unless one is given."""
    if isinstance(value, EasyTime):
        return value if tolerance is None else value.with_tolerance(tolerance)
    return EasyTime(value, tolerance=tolerance)


def compare(
    time1: TimeValue, time2: TimeValue, tolerance: ToleranceLike | None = None
) -> int:
    """Return -1, 0 or 1 as ``time1`` is older, the same, or newer than ``time2``."""
    return _wrap(time1, tolerance).compare(time2)


def newer(
    time1: TimeValue, time2: TimeValue, tolerance: ToleranceLike | None = None
) -> bool:
    """True if ``time1 > time2``, using a tolerant comparison."""
    return compare(time1, time2, tolerance) > 0


def older(
    time1: TimeValue, time2: TimeValue, tolerance: ToleranceLike | None = None
) -> bool:
    """True if ``time1 < time2``, using a tolerant comparison."""
    return compare(time1, time2, tolerance) < 0


def same(
    time1: TimeValue, time2: TimeValue, tolerance: ToleranceLike | None = None
) -> bool:
    """True if ``time1 == time2``, using a tolerant comparison."""
    return compare(time1, time2, tolerance) == 0


def different(
    time1: TimeValue, time2: TimeValue, tolerance: ToleranceLike | None = None
) -> bool:
    return not same(time1, time2, tolerance)


def between(
    time1: TimeValue,
    t_min: TimeValue | TimeRange | range,
    t_max: TimeValue = None,
    tolerance: ToleranceLike | None = None,
) -> bool:
    """True if ``t_min <= time1 <= t_max``, using tolerant comparisons.

    Either pass both bounds or a single TimeRange::

        between(t, "2010-09-08 07:06:05 -04:00", "2010-09-08 15:06:05 GMT")
        between(t, TimeRange(t_min, t_max), tolerance=1)
    """
    return _wrap(time1, tolerance).between(t_min, t_max)


def add(time: TimeValue, duration: Duration | int | float) -> EasyTime:
    """Return ``time`` shifted forward by ``duration`` (seconds if numeric)."""
    return _wrap(time) + duration


def subtract(time: TimeValue, time_or_duration: TimeValue) -> EasyTime | timedelta:
    """Subtract a duration (giving an EasyTime) or a time (giving a timedelta)."""
    return _wrap(time) - time_or_duration
