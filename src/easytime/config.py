"""Process-wide configuration: the default comparison tolerance.

The default tolerance is ordinary shared state. Set it once at startup,
before comparisons run concurrently::

    import easytime
    easytime.set_comparison_tolerance("5s")

or load it from an ``easytime.yaml`` file::

    comparison_tolerance: 5s
    defaults:
      format: rfc2822
"""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import Any

import yaml

from easytime._constants import CONFIG_FILE_NAMES, DEFAULT_COMPARISON_TOLERANCE
from easytime._duration import to_seconds
from easytime.errors import EasyTimeConfigError

logger = logging.getLogger(__name__)

_comparison_tolerance: int = DEFAULT_COMPARISON_TOLERANCE


def get_comparison_tolerance() -> int:
    """Return the process-wide default tolerance in seconds."""
    return _comparison_tolerance


def set_comparison_tolerance(value: int | float | str | timedelta) -> None:
    """Replace the process-wide default tolerance. ``0`` disables it."""
    global _comparison_tolerance
    seconds = to_seconds(value)
    logger.debug(
        "Default comparison tolerance: %ss -> %ss", _comparison_tolerance, seconds
    )
    _comparison_tolerance = seconds


def reset_comparison_tolerance() -> None:
    """Restore the built-in default tolerance (one minute)."""
    set_comparison_tolerance(DEFAULT_COMPARISON_TOLERANCE)


def _find_config_file() -> Path | None:
    for name in CONFIG_FILE_NAMES:
        if Path(name).exists():
            return Path(name)
    return None


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load easytime.yaml (or an explicit file) into a dict.

    Returns an empty dict when no file is found.
    """
    config_path = Path(path) if path is not None else _find_config_file()
    if config_path is None:
        return {}
    if not config_path.exists():
        raise EasyTimeConfigError(f"Config file '{config_path}' not found.")

    logger.debug("Loading config from %s", config_path)
    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as exc:
        raise EasyTimeConfigError(
            f"Config file '{config_path}' is not valid YAML.\n\n  {exc}\n"
        ) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise EasyTimeConfigError(
            f"Config file '{config_path}' must contain a mapping, "
            f"got {type(data).__name__}."
        )
    return data


def apply_config(config: dict[str, Any]) -> int:
    """Apply ``comparison_tolerance`` from a loaded config mapping, if set.

    Returns the effective default tolerance.
    """
    tolerance = config.get("comparison_tolerance")
    if tolerance is not None:
        set_comparison_tolerance(tolerance)
    return get_comparison_tolerance()


def configure(path: str | Path | None = None) -> int:
    """Load a config file and apply its ``comparison_tolerance``, if present.

    Returns the effective default tolerance.
    """
    return apply_config(load_config(path))
