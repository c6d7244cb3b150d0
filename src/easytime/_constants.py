"""Shared constants for EasyTime."""

# Comparison tolerance (seconds)
DEFAULT_COMPARISON_TOLERANCE: int = 60

# Structural format names, in detection order
FORMAT_RFC2822: str = "rfc2822"
FORMAT_HTTPDATE: str = "httpdate"
FORMAT_XMLSCHEMA: str = "xmlschema"
FORMAT_ISO8601: str = "iso8601"
FORMAT_GENERIC: str = "generic"

# Output styles accepted by format_instant()
OUTPUT_STYLES: tuple[str, ...] = (
    FORMAT_ISO8601,
    FORMAT_XMLSCHEMA,
    FORMAT_RFC2822,
    FORMAT_HTTPDATE,
    "epoch",
)
DEFAULT_OUTPUT_STYLE: str = FORMAT_ISO8601

# Config file names, checked in order
CONFIG_FILE_NAMES: tuple[str, ...] = ("easytime.yaml", "easytime.yml")
