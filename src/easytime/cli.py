"""EasyTime CLI: command-line interface powered by click and rich."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from easytime._constants import DEFAULT_OUTPUT_STYLE, OUTPUT_STYLES
from easytime._duration import format_duration
from easytime._version import __version__
from easytime.errors import EasyTimeConfigError, EasyTimeError

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

_VERDICTS = {-1: "older", 0: "same", 1: "newer"}

_FORMAT_EXAMPLES = [
    ("rfc2822", "Wed, 05 Oct 2011 22:26:12 -0400", "e-mail headers"),
    ("httpdate", "Thu, 06 Oct 2011 02:26:12 GMT", "web servers and logs"),
    ("xmlschema", "2011-10-05T22:26:12-04:00", "XML documents"),
    ("iso8601", "2011-10-05T22:26:12.345Z", "most other systems"),
    ("generic", "2010-09-08 07:06:05 -04:00", "anything else dateutil can read"),
]


def _setup_logging(verbose: bool, debug: bool) -> None:
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        return
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
    )


def _try_load_config(path: str | None = None) -> dict[str, Any]:
    """Load easytime.yaml and apply its comparison tolerance.

    A discovered file that fails to load is skipped; a file named with
    ``--config`` must load.
    """
    from easytime.config import apply_config, load_config

    try:
        config = load_config(path)
        apply_config(config)
    except EasyTimeConfigError as exc:
        if path is not None:
            _fail(exc)
        logger.debug("Could not load easytime.yaml: %s", exc)
        return {}
    return config


def _resolve_format(output_format: str | None, config: dict) -> str:
    """Resolve the output style from CLI arg, config, or default."""
    if output_format is not None:
        return output_format
    defaults = config.get("defaults") or {}
    if not isinstance(defaults, dict):
        logger.debug("Ignoring non-mapping defaults %r in config", defaults)
        return DEFAULT_OUTPUT_STYLE
    style = defaults.get("format", DEFAULT_OUTPUT_STYLE)
    if style not in OUTPUT_STYLES:
        logger.debug("Ignoring unknown defaults.format %r in config", style)
        return DEFAULT_OUTPUT_STYLE
    return style


def _fail(exc: EasyTimeError) -> NoReturn:
    err_console.print(f"[red]Error: {escape(str(exc).rstrip())}[/red]")
    sys.exit(1)


@click.group()
@click.version_option(__version__, prog_name="easytime")
@click.option("-v", "--verbose", is_flag=True, help="Show informational logs")
@click.option("--debug", is_flag=True, help="Show debug logs (parser decisions)")
@click.option("--config", "config_path", default=None, help="Path to easytime.yaml")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool, config_path: str | None):
    """EasyTime: convert time values and compare them with a tolerance."""
    _setup_logging(verbose, debug)
    ctx.obj = _try_load_config(config_path)


@cli.command(name="convert")
@click.argument("value")
@click.option(
    "--format",
    "-f",
    "output_format",
    default=None,
    type=click.Choice(OUTPUT_STYLES),
    help="Output style (default: iso8601)",
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def convert_cmd(
    config: dict, value: str, output_format: str | None, json_output: bool
):
    """Parse a time string and print it in a canonical form."""
    from easytime.core import EasyTime
    from easytime.formats import format_instant, parse_style

    style = _resolve_format(output_format, config)
    try:
        eztime = EasyTime.parse(value)
    except EasyTimeError as exc:
        _fail(exc)

    detected = parse_style(value)
    rendered = format_instant(eztime.time, style)

    if json_output:
        click.echo(
            json.dumps(
                {
                    "input": value,
                    "detected_format": detected,
                    "output_format": style,
                    "value": rendered,
                    "epoch": eztime.timestamp(),
                },
                indent=2,
            )
        )
    else:
        console.print(f"[dim]{escape(value)}  ({detected})[/dim]")
        console.print(rendered, markup=False, highlight=False)


@cli.command(name="compare")
@click.argument("time1")
@click.argument("time2")
@click.option(
    "--tolerance", "-t", default=None, help="Tolerance, e.g. 5, 5s, 2m (default: 60s)"
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def compare_cmd(time1: str, time2: str, tolerance: str | None, json_output: bool):
    """Compare two times: -1 (older), 0 (same) or 1 (newer)."""
    from easytime.core import EasyTime

    try:
        eztime1 = EasyTime(time1, tolerance=tolerance)
        eztime2 = EasyTime(time2)
        result = eztime1.compare(eztime2)
    except EasyTimeError as exc:
        _fail(exc)

    diff = eztime1 - eztime2
    limit = eztime1.comparison_tolerance
    logger.info("Comparing with a tolerance of %ss", limit)

    if json_output:
        click.echo(
            json.dumps(
                {
                    "time1": eztime1.isoformat(),
                    "time2": eztime2.isoformat(),
                    "difference_seconds": diff.total_seconds(),
                    "tolerance_seconds": limit,
                    "result": result,
                    "verdict": _VERDICTS[result],
                },
                indent=2,
            )
        )
        return

    console.print()
    console.print(f"  time1  {eztime1.isoformat()}")
    console.print(f"  time2  {eztime2.isoformat()}")
    console.print(
        f"  [dim]difference {format_duration(diff)}, tolerance {limit}s[/dim]"
    )
    colour = "green" if result == 0 else "yellow"
    console.print(
        f"\n[bold {colour}]{result}[/bold {colour}]  time1 is {_VERDICTS[result].upper()}"
        + (" as time2" if result == 0 else " than time2")
    )
    console.print()


@cli.command(name="between")
@click.argument("value")
@click.argument("t_min")
@click.argument("t_max")
@click.option(
    "--tolerance", "-t", default=None, help="Tolerance, e.g. 5, 5s, 2m (default: 60s)"
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.option("--strict", is_flag=True, help="Exit code 1 if outside the range (CI mode)")
def between_cmd(
    value: str,
    t_min: str,
    t_max: str,
    tolerance: str | None,
    json_output: bool,
    strict: bool,
):
    """Check whether VALUE lies between T_MIN and T_MAX (inclusive)."""
    from easytime.core import between

    try:
        inside = between(value, t_min, t_max, tolerance=tolerance)
    except EasyTimeError as exc:
        _fail(exc)

    if json_output:
        click.echo(
            json.dumps(
                {"value": value, "min": t_min, "max": t_max, "between": inside},
                indent=2,
            )
        )
    elif inside:
        console.print("[bold green]INSIDE[/bold green]  within the range")
    else:
        console.print("[bold yellow]OUTSIDE[/bold yellow]  not within the range")

    if strict and not inside:
        sys.exit(1)


@cli.command(name="formats")
def formats_cmd():
    """List the recognized time string formats."""
    table = Table(title="TIME FORMATS", show_header=True, header_style="bold")
    table.add_column("Format")
    table.add_column("Example")
    table.add_column("Used by")
    for name, example, used_by in _FORMAT_EXAMPLES:
        table.add_row(name, example, used_by)

    console.print()
    console.print(table)
    console.print("\n[dim]Formats are checked top to bottom; the first match wins.[/dim]")
    console.print()


def main() -> None:
    cli()
