"""Command-line argument parsing."""

from __future__ import annotations

import argparse
import textwrap

from src.common.console import warn
from src.common.constants import (
    DEFAULT_PRECISION,
    MAX_PRECISION,
    MIN_PRECISION,
    STDIN_PATH,
)
from src.numstat.config import Config, OutputFormat
from src.numstat.errors import UsageError


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises ``UsageError`` instead of exiting with 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="numstat",
        description="numstat - Calculate statistics for numerical data",
        allow_abbrev=False,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            input:
              If FILE is provided, reads numbers from file
              If no FILE is given (or FILE is -), reads from stdin
              Reading stops at the first token that is not a number

            statistics calculated:
              - Count, Sum, Mean, Median
              - Minimum, Maximum, Range
              - Q1 (25th percentile), Q3 (75th percentile)
              - Standard Deviation (population)

            examples:
              numstat data.txt              # Read from file
              cat data.txt | numstat        # Read from stdin
              echo "1 2 3" | numstat        # Quick calculation
              numstat -j data.txt           # JSON output
              numstat -p 2 data.txt         # 2 decimal places
        """),
    )
    parser.add_argument("file", nargs="?", default=None, metavar="FILE")
    parser.add_argument(
        "-j", "--json", action="store_true", default=False,
        help="Output in JSON format",
    )
    parser.add_argument(
        "-p", "--precision", type=int, default=DEFAULT_PRECISION, metavar="N",
        help=f"Set decimal precision (default: {DEFAULT_PRECISION})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=False,
        help="Log debug events to stderr",
    )
    return parser


def _checked_precision(value: int) -> int:
    if MIN_PRECISION <= value <= MAX_PRECISION:
        return value
    warn(
        f"Precision should be between {MIN_PRECISION} and {MAX_PRECISION}. "
        f"Using default ({DEFAULT_PRECISION})."
    )
    return DEFAULT_PRECISION


def parse_args(argv: list[str] | None = None) -> Config:
    """Turn *argv* (without the program name) into a ``Config``.

    ``-h`` prints the usage text and exits 0.  Unknown options, a missing
    ``-p`` value, and extra positional arguments raise ``UsageError``.
    """
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)

    # argparse takes negative-number lookalikes such as -5 as positionals
    candidates = ([args.file] if args.file is not None else []) + extras
    for arg in candidates:
        if arg.startswith("-") and arg != STDIN_PATH:
            raise UsageError(f"Unknown option '{arg}'")
    if extras:
        raise UsageError("Multiple input files specified")

    input_path = None if args.file in (None, STDIN_PATH) else args.file
    return Config(
        output_format=OutputFormat.JSON if args.json else OutputFormat.TEXT,
        precision=_checked_precision(args.precision),
        input_path=input_path,
        verbose=args.verbose,
    )
