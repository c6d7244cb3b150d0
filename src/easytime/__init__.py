"""EasyTime: auto-converting time values with tolerant comparisons."""

from easytime._version import __version__
from easytime.config import (
    apply_config,
    configure,
    get_comparison_tolerance,
    reset_comparison_tolerance,
    set_comparison_tolerance,
)
from easytime.convert import convert, is_time_like
from easytime.core import (
    EasyTime,
    TimeRange,
    add,
    between,
    compare,
    different,
    easy_time,
    newer,
    older,
    parse,
    same,
    subtract,
)
from easytime.errors import (
    ConversionError,
    EasyTimeConfigError,
    EasyTimeError,
    InvalidComponentsError,
    UnknownTypeError,
    UnparseableTextError,
)
from easytime.formats import detect_format

__all__ = [
    "ConversionError",
    "EasyTime",
    "EasyTimeConfigError",
    "EasyTimeError",
    "InvalidComponentsError",
    "TimeRange",
    "UnknownTypeError",
    "UnparseableTextError",
    "__version__",
    "add",
    "apply_config",
    "between",
    "compare",
    "configure",
    "convert",
    "detect_format",
    "different",
    "easy_time",
    "get_comparison_tolerance",
    "is_time_like",
    "newer",
    "older",
    "parse",
    "reset_comparison_tolerance",
    "same",
    "set_comparison_tolerance",
    "subtract",
]
