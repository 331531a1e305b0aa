"""CLI entrypoint: parse → read → compute → present."""

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

import structlog

from src.common.console import fail
from src.common.logging import configure_structlog
from src.numstat.args import parse_args
from src.numstat.errors import EmptyInputError, InputOpenError, NumstatError
from src.numstat.reader import read_numbers
from src.numstat.report import present
from src.numstat.stats import compute_stats

log = structlog.get_logger("numstat.cli")


@contextmanager
def open_input(path: str | None) -> Iterator[TextIO]:
    """Yield the file at *path*, or stdin when *path* is None.

    Both are decoded as UTF-8 with undecodable bytes replaced, so stray
    binary noise ends the read like any other non-numeric token.  The file
    is closed on every exit path; stdin is left open.
    """
    if path is None:
        log.debug("input_opened", source="stdin")
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            yield sys.stdin
            return
        stream = io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")
        try:
            yield stream
        finally:
            stream.detach()
        return

    try:
        stream = open(path, encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputOpenError(path, exc.strerror) from exc
    log.debug("input_opened", source=path)
    with stream:
        yield stream


def run(argv: list[str] | None = None) -> None:
    """Execute one run; errors propagate as ``NumstatError``."""
    config = parse_args(argv)
    configure_structlog(config.verbose)

    with open_input(config.input_path) as stream:
        values = read_numbers(stream)

    if not values:
        raise EmptyInputError()

    stats = compute_stats(values)
    present(stats, config.output_format, config.precision)


def main(argv: list[str] | None = None) -> None:
    try:
        run(argv)
    except NumstatError as exc:
        fail(str(exc), hint=exc.hint, code=exc.exit_code)
