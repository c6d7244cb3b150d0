"""EasyTime benchmark: measure conversion and comparison throughput per input kind.

Usage:
    python benchmarks/bench.py              # Run all benchmarks
    python benchmarks/bench.py --quick      # Run 10K-value scenarios only
    python benchmarks/bench.py --runs 5     # Number of iterations per scenario (default: 3)

Results are printed as a table and saved to benchmarks/results.json.

Methodology:
    - Each scenario runs N iterations (default 3); we report median and stddev.
    - A warmup run is executed before the first timed iteration.
    - GC is disabled during timed runs to reduce noise.
    - Input generation uses a fixed seed for reproducibility.
"""

from __future__ import annotations

import argparse
import gc
import json
import platform
import random
import statistics
import sys
import time
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from pathlib import Path

# Ensure easytime is importable from the repo root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))
import easytime

SEED = 42

_EPOCH_2000 = datetime(2000, 1, 1, tzinfo=timezone.utc)
_SPAN_SECONDS = 30 * 365 * 86400


# ---------------------------------------------------------------------------
# Input generation
# ---------------------------------------------------------------------------

def _random_instants(n: int) -> list[datetime]:
    rng = random.Random(SEED)
    instants = []
    for _ in range(n):
        offset = timezone(timedelta(minutes=rng.randrange(-12 * 60, 14 * 60, 15)))
        moment = _EPOCH_2000 + timedelta(seconds=rng.randrange(_SPAN_SECONDS))
        instants.append(moment.astimezone(offset))
    return instants


def generate_inputs(kind: str, n: int) -> list:
    """Generate ``n`` values of the given input kind."""
    instants = _random_instants(n)
    if kind == "iso8601":
        return [t.isoformat() for t in instants]
    if kind == "xmlschema":
        return [t.isoformat(timespec="seconds") for t in instants]
    if kind == "rfc2822":
        return [format_datetime(t) for t in instants]
    if kind == "httpdate":
        return [format_datetime(t.astimezone(timezone.utc), usegmt=True) for t in instants]
    if kind == "generic":
        return [t.strftime("%B %d, %Y %H:%M:%S %z") for t in instants]
    if kind == "datetime":
        return instants
    if kind == "epoch":
        return [t.timestamp() for t in instants]
    if kind == "components":
        return [
            [t.year, t.month, t.day, t.hour, t.minute, t.second, t.strftime("%z")]
            for t in instants
        ]
    raise ValueError(f"Unknown input kind: {kind}")


# ---------------------------------------------------------------------------
# Timed runs
# ---------------------------------------------------------------------------

def _timed(fn, n_runs: int) -> list[float]:
    # Warmup run (not timed)
    fn()

    times = []
    for _ in range(n_runs):
        gc.disable()
        t0 = time.perf_counter()
        fn()
        elapsed = time.perf_counter() - t0
        gc.enable()
        times.append(elapsed)
    return times


def _summary(operation: str, times: list[float], n_values: int) -> dict:
    median = statistics.median(times)
    return {
        "operation": operation,
        "median_seconds": round(median, 4),
        "stddev_seconds": round(statistics.stdev(times), 4) if len(times) > 1 else 0.0,
        "runs": len(times),
        "values": n_values,
        "per_second": int(n_values / median) if median else 0,
    }


def bench_convert(values: list, *, n_runs: int = 3) -> dict:
    """Run easytime.convert() over every value."""
    convert = easytime.convert

    def _run():
        for value in values:
            convert(value)

    return _summary("convert", _timed(_run, n_runs), len(values))


def bench_compare(values: list, *, n_runs: int = 3) -> dict:
    """Compare each value with its neighbour under the default tolerance."""
    compare = easytime.compare
    pairs = list(zip(values, values[1:]))

    def _run():
        for a, b in pairs:
            compare(a, b)

    return _summary("compare", _timed(_run, n_runs), len(pairs))


# ---------------------------------------------------------------------------
# Benchmark matrix
# ---------------------------------------------------------------------------

KINDS = [
    "iso8601",
    "xmlschema",
    "rfc2822",
    "httpdate",
    "generic",
    "datetime",
    "epoch",
    "components",
]

CONFIGS = [(f"{n // 1000}K {kind}", kind, n) for n in (10_000, 100_000) for kind in KINDS]

QUICK_CONFIGS = [c for c in CONFIGS if c[2] <= 10_000]


def format_table(results: list[dict]) -> str:
    """Format results as an aligned ASCII table."""
    headers = ["Scenario", "Operation", "Median", "Stddev", "Values", "Per second"]
    rows = []
    for r in results:
        rows.append([
            r["scenario"],
            r["operation"],
            f"{r['median_seconds']:.4f}s",
            f"±{r['stddev_seconds']:.4f}s",
            f"{r['values']:,}",
            f"{r['per_second']:,}",
        ])

    widths = [
        max(len(h), max((len(row[i]) for row in rows), default=0))
        for i, h in enumerate(headers)
    ]
    sep = "+-" + "-+-".join("-" * w for w in widths) + "-+"
    header_line = "| " + " | ".join(h.ljust(w) for h, w in zip(headers, widths)) + " |"

    lines = [sep, header_line, sep]
    for row in rows:
        lines.append("| " + " | ".join(val.ljust(w) for val, w in zip(row, widths)) + " |")
    lines.append(sep)
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description="EasyTime benchmarks")
    parser.add_argument("--quick", action="store_true", help="Only run 10K-value scenarios")
    parser.add_argument("--runs", type=int, default=3, help="Timed iterations per scenario (default: 3)")
    args = parser.parse_args()

    configs = QUICK_CONFIGS if args.quick else CONFIGS
    all_results = []

    print("\nEasyTime Benchmark Suite")
    print("========================")
    print(f"  Python {platform.python_version()} | EasyTime {easytime.__version__}")
    print(f"  {args.runs} runs per scenario (median reported) | seed={SEED}")
    print()

    for label, kind, n in configs:
        print(f"  Generating inputs: {label} ...", end=" ", flush=True)
        t0 = time.perf_counter()
        values = generate_inputs(kind, n)
        print(f"({time.perf_counter() - t0:.1f}s)")

        for bench in (bench_convert, bench_compare):
            result = bench(values, n_runs=args.runs)
            result["scenario"] = label
            all_results.append(result)
            print(
                f"  {result['operation']:<8} {label}: {result['median_seconds']:.4f}s "
                f"(±{result['stddev_seconds']:.4f}s)"
            )
        print()

    print(format_table(all_results))

    output = {
        "methodology": "1 warmup + N timed runs, GC disabled, median reported.",
        "seed": SEED,
        "runs_per_scenario": args.runs,
        "versions": {
            "python": platform.python_version(),
            "easytime": easytime.__version__,
        },
        "results": all_results,
    }

    out_path = Path(__file__).parent / "results.json"
    with open(out_path, "w") as f:
        json.dump(output, f, indent=2)
    print(f"\nResults saved to {out_path}")


if __name__ == "__main__":
    main()
