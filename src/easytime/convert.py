"""Conversion of most date and time values into an aware datetime.

    convert()                   # => now
    convert(str)                # => detect the string's format and parse it
    convert(EasyTime)           # => EasyTime.time
    convert(datetime)           # => the datetime (naive values taken as local time)
    convert(date)               # => midnight UTC of that date
    convert([yyyy, mm, dd, ...])  # => datetime(yyyy, mm, dd, ...)
    convert(timedelta(hours=2))   # => now + duration
    convert(1318040772)         # => seconds since the Epoch

With ``coerce=False`` durations and numbers are returned unchanged, which
lets subtraction tell "time minus time" apart from "time minus duration".
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Union

from dateutil.relativedelta import relativedelta

from easytime.errors import invalid_components_error, unknown_type_error
from easytime.formats import as_instant, parse_string

Duration = Union[timedelta, relativedelta]

DURATION_TYPES = (timedelta, relativedelta)

# year is required; the rest default like datetime(yyyy, 1, 1, 0, 0, 0)
_COMPONENT_DEFAULTS = (None, 1, 1, 0, 0, 0)

_OFFSET_RE = re.compile(r"^([+-])(\d\d):?(\d\d)$")


def now() -> datetime:
    """The current instant, in the local zone."""
    return datetime.now(timezone.utc).astimezone()


def convert(value: Any = None, coerce: bool = True) -> Any:
    """Convert a date/time value to an aware datetime.

    Args:
        value: A string, datetime, date, EasyTime, component list,
            duration, number of seconds since the Epoch, or None for now.
        coerce: When False, durations and numbers are returned as-is.

    Raises:
        UnparseableTextError: The string could not be parsed.
        InvalidComponentsError: The component list is not a valid datetime.
        UnknownTypeError: The value is of an unsupported type.
    """
    from easytime.core import EasyTime

    if isinstance(value, str):
        return parse_string(value)
    if isinstance(value, (list, tuple)):
        return from_components(value)
    if isinstance(value, EasyTime):
        return value.time
    if isinstance(value, datetime):
        return as_instant(value)
    if isinstance(value, DURATION_TYPES):
        # coerced durations are relative to now
        return now() + value if coerce else value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not coerce:
            return value
        # seconds since the Epoch
        return datetime.fromtimestamp(value, tz=timezone.utc).astimezone()
    if isinstance(value, date):
        return parse_string(f"{value.isoformat()}T00:00:00+00:00")
    if value is None:
        return now()
    raise unknown_type_error(value)


def from_components(components: list | tuple) -> datetime:
    """Build a datetime from ``[year, month, day, hour, minute, second, offset]``.

    Trailing components may be omitted. A float second carries
    microseconds. Without an offset the time is local.
    """
    if not 1 <= len(components) <= 7:
        raise invalid_components_error(components, "expected 1 to 7 components")

    fields = list(components[:6]) + list(_COMPONENT_DEFAULTS[len(components) :])
    offset = components[6] if len(components) == 7 else None
    year, month, day, hour, minute, second = fields[:6]

    try:
        whole = int(second)
        micro = min(round((second - whole) * 1_000_000), 999_999)
        value = datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            whole,
            micro,
            tzinfo=_offset_tzinfo(offset),
        )
    except (TypeError, ValueError, OverflowError) as exc:
        raise invalid_components_error(components, str(exc)) from exc
    return as_instant(value)


def _offset_tzinfo(offset: Any) -> tzinfo | None:
    if offset is None or isinstance(offset, tzinfo):
        return offset
    if isinstance(offset, timedelta):
        return timezone(offset)
    if isinstance(offset, (int, float)) and not isinstance(offset, bool):
        return timezone(timedelta(seconds=offset))
    if isinstance(offset, str):
        if offset.upper() in ("Z", "UTC", "GMT"):
            return timezone.utc
        match = _OFFSET_RE.match(offset)
        if match:
            sign, hours, minutes = match.groups()
            delta = timedelta(hours=int(hours), minutes=int(minutes))
            return timezone(-delta if sign == "-" else delta)
    raise ValueError(f"invalid UTC offset {offset!r}")


def is_time_like(value: Any) -> bool:
    """True for absolute time values: datetime, date and EasyTime.

    Numbers and durations are not time-like, even though they convert.
    """
    from easytime.core import EasyTime

    return isinstance(value, (datetime, date, EasyTime))
