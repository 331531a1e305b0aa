"""Number reader: pull whitespace-delimited reals out of a text stream."""

from __future__ import annotations

import math
import re
from typing import Iterable, Iterator, TextIO

import structlog

from src.numstat.errors import AllocationError

# Decimal reals, plain or scientific: 3, -2.5, .5, 5., 1e-3, +4.2E+10
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

log = structlog.get_logger("numstat.reader")


def parse_number(token: str) -> float | None:
    """Return *token* as a float, or ``None`` if it is not a finite decimal real."""
    if _NUMBER_RE.fullmatch(token) is None:
        return None
    value = float(token)
    return value if math.isfinite(value) else None


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def read_numbers(stream: TextIO) -> list[float]:
    """Read numbers from *stream* until EOF or the first non-numeric token.

    A non-numeric token ends the input silently: nothing after it is
    collected, even valid numbers.  An empty result is not an error here.
    Raises ``AllocationError`` if the buffer cannot grow.
    """
    values: list[float] = []
    stopped_at: str | None = None
    try:
        for token in _tokens(stream):
            number = parse_number(token)
            if number is None:
                stopped_at = token
                break
            values.append(number)
    except MemoryError as exc:
        raise AllocationError() from exc

    log.debug(
        "numbers_read",
        count=len(values),
        stopped_early=stopped_at is not None,
        stop_token=stopped_at,
    )
    return values
