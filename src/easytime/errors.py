"""EasyTime error hierarchy.

Every error follows the format:
  WHAT happened → WHY it matters → HOW to fix
"""

from __future__ import annotations

from typing import Any


class EasyTimeError(Exception):
    """Base error for all EasyTime operations."""


class ConversionError(EasyTimeError):
    """A value could not be converted to a time instant."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class UnparseableTextError(ConversionError, ValueError):
    """A time string matched no known format and the generic parser failed."""


class UnknownTypeError(ConversionError, TypeError):
    """The value is not one of the convertible date/time kinds."""


class InvalidComponentsError(ConversionError, ValueError):
    """A component list could not be assembled into a datetime."""


class EasyTimeConfigError(EasyTimeError, ValueError):
    """Invalid parameter combination or configuration."""


_KNOWN_TYPES = (
    "str, datetime, date, EasyTime, timedelta, relativedelta, "
    "int, float, list/tuple of components, None"
)


def unparseable_text_error(text: str) -> UnparseableTextError:
    """Build a helpful error for a time string nobody could parse."""
    msg = f"Cannot parse {text!r} as a date/time.\n\n"
    msg += "  The string matched none of the structured formats (RFC 2822,\n"
    msg += "  HTTP-date, XML Schema, ISO 8601) and the generic parser rejected it.\n\n"
    msg += "  Examples of accepted strings:\n"
    msg += "    2011-10-05T22:26:12-04:00\n"
    msg += "    Wed, 05 Oct 2011 22:26:12 -0400\n"
    msg += "    Thu, 06 Oct 2011 02:26:12 GMT\n"
    return UnparseableTextError(msg, value=text)


def unknown_type_error(value: Any) -> UnknownTypeError:
    """Build a helpful error for a value of an unsupported type."""
    msg = f"EasyTime: unknown value: {value!r} ({type(value).__name__}).\n\n"
    msg += f"  Accepted kinds: {_KNOWN_TYPES}.\n"
    return UnknownTypeError(msg, value=value)


def invalid_components_error(
    components: list | tuple, reason: str
) -> InvalidComponentsError:
    """Build error for a component list that does not form a valid datetime."""
    msg = f"Cannot build a datetime from components {list(components)!r}: {reason}.\n\n"
    msg += "  Components are positional: "
    msg += "[year, month, day, hour, minute, second, offset].\n"
    msg += "  Only the year is required; offset may be '+HH:MM', 'Z' or seconds.\n"
    return InvalidComponentsError(msg, value=components)


def negative_tolerance_error(value: Any) -> EasyTimeConfigError:
    """Build error for a tolerance below zero."""
    msg = f"Comparison tolerance must be >= 0 seconds, got {value!r}.\n\n"
    msg += "  Use 0 to disable tolerant comparisons.\n"
    return EasyTimeConfigError(msg)
