"""Presenter: text and JSON renderings of a ``Stats`` record."""

from __future__ import annotations

import math
import sys
from typing import Callable, TextIO

from src.numstat.config import OutputFormat
from src.numstat.stats import Stats

# (label, field) in text-report order
TEXT_FIELDS: list[tuple[str, str]] = [
    ("Sum",     "sum"),
    ("Mean",    "mean"),
    ("Median",  "median"),
    ("Minimum", "min"),
    ("Maximum", "max"),
    ("Range",   "range"),
    ("Q1",      "q1"),
    ("Q3",      "q3"),
    ("StdDev",  "stddev"),
]

# JSON key order (count is emitted first, as an integer)
JSON_FIELDS: list[str] = [
    "sum", "mean", "median", "min", "max", "range", "q1", "q3", "stddev",
]


def fmt_fixed(value: float, precision: int) -> str:
    """Format *value* with exactly *precision* digits after the point."""
    return f"{value:.{precision}f}"


def render_text(stats: Stats, precision: int) -> str:
    width = max(len(label) for label, _ in TEXT_FIELDS) + 2  # "Label:" + space
    lines = [f"Statistics for {stats.count} numbers:"]
    for label, key in TEXT_FIELDS:
        value = fmt_fixed(getattr(stats, key), precision)
        lines.append(f"  {label + ':':<{width}}{value}")
    return "\n".join(lines) + "\n"


def _json_number(value: float, precision: int) -> str:
    # JSON has no literal for inf/nan
    if not math.isfinite(value):
        return "null"
    return fmt_fixed(value, precision)


def render_json(stats: Stats, precision: int) -> str:
    members = [f'  "count": {stats.count}']
    members += [
        f'  "{key}": {_json_number(getattr(stats, key), precision)}'
        for key in JSON_FIELDS
    ]
    return "{\n" + ",\n".join(members) + "\n}\n"


RENDERERS: dict[OutputFormat, Callable[[Stats, int], str]] = {
    OutputFormat.TEXT: render_text,
    OutputFormat.JSON: render_json,
}


def render(stats: Stats, output_format: OutputFormat, precision: int) -> str:
    return RENDERERS[output_format](stats, precision)


def present(
    stats: Stats,
    output_format: OutputFormat,
    precision: int,
    out: TextIO | None = None,
) -> None:
    """Write the rendered report to *out* (stdout by default)."""
    (out or sys.stdout).write(render(stats, output_format, precision))
