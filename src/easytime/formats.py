"""Time string format detection, parsing, and rendering.

Strings are examined for several date-time shapes and a matching strict
parser is used; when no shape matches, or the strict parser rejects the
string, the general-purpose ``dateutil`` parser is the backstop.

Recognized shapes, checked in order:

    rfc2822    Wed, 05 Oct 2011 22:26:12 -0400    (e-mail)
    httpdate   Thu, 06 Oct 2011 02:26:12 GMT      (web logs; rfc2822 with a symbolic zone)
    xmlschema  2011-10-05T22:26:12-04:00          (strict subset of iso8601)
    iso8601    CCYY-MM-DDThh:mm:ss.sssTZD and the compact/ordinal variants
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Callable

from dateutil import parser as dateutil_parser

from easytime._constants import (
    FORMAT_GENERIC,
    FORMAT_HTTPDATE,
    FORMAT_ISO8601,
    FORMAT_RFC2822,
    FORMAT_XMLSCHEMA,
    OUTPUT_STYLES,
)
from easytime.errors import EasyTimeConfigError, unparseable_text_error

logger = logging.getLogger(__name__)

# Date part of an ISO 8601 string
ISO_DATE_RE = r"""(?: \d{4}-\d\d-\d\d     # yyyy-mm-dd
                    | \d{4}-\d\d          # yyyy-mm
                    | \d{4}-\d{3}         # yyyy-ddd
                    | \d{7,8}             # yyyymmdd or yyyyddd
                    | --\d\d-?\d\d        # --mm-dd or --mmdd
                  )"""

# Time part of an ISO 8601 string
ISO_TIME_RE = r"""(?: (?: \d\d:\d\d:\d\d      # hh:mm:ss
                        | \d{6}               # hhmmss
                      )
                      (?: \.\d+ )?            # optional .sss
                    | \d\d:?\d\d              # hh:mm or hhmm
                    | \d{2}                   # hh
                  )"""

# Zone part of an ISO 8601 string
ISO_ZONE_RE = r"""(?: Z                   # zulu
                    | [+-]\d\d:?\d\d      # +-HH:MM or +-HHMM
                  )"""

ISO8601_RE = re.compile(
    rf"^ {ISO_DATE_RE} T {ISO_TIME_RE} {ISO_ZONE_RE} $", re.VERBOSE
)

RFC2822_RE = re.compile(
    r"""^ \w{3},          \s   # Wed,
          \d{1,2}         \s   # 01 or 1
          \w{3}           \s   # Oct
          \d{4}           \s   # 2020
          \d\d:\d\d:\d\d  \s   # HH:MM:SS
          [+-]\d\d:?\d\d       # +-HH:MM or +-HHMM
        $""",
    re.VERBOSE,
)

HTTPDATE_RE = re.compile(
    r"""^ \w{3},          \s   # Thu,
          \d{1,2}         \s   # 06 or 6
          \w{3}           \s   # Oct
          \d{4}           \s   # 2011
          \d\d:\d\d:\d\d  \s   # HH:MM:SS
          [A-Za-z]+            # GMT
        $""",
    re.VERBOSE,
)

XMLSCHEMA_RE = re.compile(
    r"""^ \d{4}-\d\d-\d\d      # yyyy-mm-dd
          T
          \d\d:\d\d:\d\d       # HH:MM:SS
          [+-]\d\d:\d\d        # +-HH:MM
        $""",
    re.VERBOSE,
)

_ZONE_COLON_RE = re.compile(r"([+-]\d\d):(\d\d)$")


def as_instant(value: datetime) -> datetime:
    """Make a datetime timezone-aware; naive values are taken as local time."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value.astimezone()
    return value


def _parse_rfc2822(text: str) -> datetime:
    # the email parser only understands offsets without a colon
    parsed = parsedate_to_datetime(_ZONE_COLON_RE.sub(r"\1\2", text))
    if parsed.tzinfo is None:
        # "-0000": UTC with no information about the local zone
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_httpdate(text: str) -> datetime:
    parsed = parsedate_to_datetime(text)
    if parsed.tzinfo is None:
        raise ValueError(f"unknown zone in {text!r}")
    return parsed


def _parse_xmlschema(text: str) -> datetime:
    return datetime.fromisoformat(text)


def _parse_iso8601(text: str) -> datetime:
    return dateutil_parser.isoparse(text)


_STRATEGIES: dict[str, tuple[re.Pattern[str], Callable[[str], datetime]]] = {
    FORMAT_RFC2822: (RFC2822_RE, _parse_rfc2822),
    FORMAT_HTTPDATE: (HTTPDATE_RE, _parse_httpdate),
    FORMAT_XMLSCHEMA: (XMLSCHEMA_RE, _parse_xmlschema),
    FORMAT_ISO8601: (ISO8601_RE, _parse_iso8601),
}


def detect_format(text: str) -> str | None:
    """Return the name of the first structural format ``text`` matches.

    Returns None when the string has none of the known shapes; such
    strings are left to the generic parser.
    """
    text = text.strip()
    for name, (pattern, _) in _STRATEGIES.items():
        if pattern.match(text):
            return name
    return None


def parse_string(text: str) -> datetime:
    """Parse a time string into an aware datetime.

    Raises:
        UnparseableTextError: If neither the detected format's parser nor
            the generic parser can read the string.
    """
    stripped = text.strip()
    style = detect_format(stripped)
    if style is not None:
        _, strategy = _STRATEGIES[style]
        try:
            return as_instant(strategy(stripped))
        except (ValueError, TypeError, OverflowError, IndexError) as exc:
            logger.debug(
                "%s parser rejected %r, using generic parser: %s", style, text, exc
            )

    try:
        # out-of-range offsets only fail once the offset is read
        return as_instant(dateutil_parser.parse(stripped))
    except (ValueError, OverflowError) as exc:
        raise unparseable_text_error(text) from exc


def parse_style(text: str) -> str:
    """Name of the strategy :func:`parse_string` starts with for ``text``."""
    return detect_format(text) or FORMAT_GENERIC


def format_instant(instant: datetime, style: str) -> str:
    """Render an aware datetime in one of the supported output styles."""
    if style == FORMAT_ISO8601:
        return instant.isoformat()
    if style == FORMAT_XMLSCHEMA:
        return instant.isoformat(timespec="seconds")
    if style == FORMAT_RFC2822:
        return format_datetime(instant)
    if style == FORMAT_HTTPDATE:
        return format_datetime(instant.astimezone(timezone.utc), usegmt=True)
    if style == "epoch":
        seconds = instant.timestamp()
        return str(int(seconds)) if seconds.is_integer() else str(seconds)
    raise EasyTimeConfigError(
        f"Unknown output format '{style}'. "
        f"Choose one of: {', '.join(OUTPUT_STYLES)}."
    )
