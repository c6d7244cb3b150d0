"""Duration parsing utilities for human-readable time intervals."""

from __future__ import annotations

import math
import re
from datetime import timedelta

from easytime.errors import EasyTimeConfigError, negative_tolerance_error

_PATTERN = re.compile(r"^(?:(\d+)d)?(?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s)?$")


def parse_duration(value: str | timedelta | None) -> timedelta | None:
    """Parse a duration string like '30s', '1m', '1d12h' into a timedelta.

    Accepts:
        - None → None
        - timedelta → pass through
        - "0" or "0s" → timedelta(0)
        - "45" → 45 seconds
        - "30s" → 30 seconds
        - "2m" → 2 minutes
        - "1d12h" → 1 day 12 hours
    """
    if value is None:
        return None
    if isinstance(value, timedelta):
        return value

    value = value.strip()
    if value.isdigit():
        return timedelta(seconds=int(value))

    match = _PATTERN.match(value)
    if not value or not match:
        raise EasyTimeConfigError(
            f"Invalid duration '{value}'. "
            "Expected format like '30s', '2m', '6h', '1d12h'."
        )

    days = int(match.group(1) or 0)
    hours = int(match.group(2) or 0)
    minutes = int(match.group(3) or 0)
    seconds = int(match.group(4) or 0)

    return timedelta(days=days, hours=hours, minutes=minutes, seconds=seconds)


def format_duration(td: timedelta | None) -> str | None:
    """Format a timedelta back to a human-readable string, e.g. '-1m2s'."""
    if td is None:
        return None
    total_seconds = int(td.total_seconds())
    if total_seconds == 0:
        return "0s"
    sign = "-" if total_seconds < 0 else ""
    days, remainder = divmod(abs(total_seconds), 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)
    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds:
        parts.append(f"{seconds}s")
    return sign + "".join(parts)


def to_seconds(value: int | float | str | timedelta) -> int:
    """Normalize a tolerance value to a non-negative number of whole seconds.

    Floats and sub-second timedeltas are truncated toward zero.
    """
    if isinstance(value, bool):
        raise EasyTimeConfigError(
            f"Tolerance must be a number of seconds, got {value!r}."
        )
    if isinstance(value, str):
        value = parse_duration(value)
    if isinstance(value, timedelta):
        seconds = int(value.total_seconds())
    elif isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise EasyTimeConfigError(
                f"Tolerance must be a finite number of seconds, got {value!r}."
            )
        seconds = int(value)
    else:
        raise EasyTimeConfigError(
            f"Tolerance must be seconds, a timedelta or a duration string, "
            f"got {type(value).__name__}."
        )
    if seconds < 0 or value != abs(value):
        raise negative_tolerance_error(value)
    return seconds
