"""ANSI colour codes and stderr message helpers."""

from __future__ import annotations

import sys


class C:
    """ANSI colour codes (no-op if stderr is not a tty)."""

    _tty = sys.stderr.isatty()
    RED = "\033[0;31m" if _tty else ""
    YELLOW = "\033[1;33m" if _tty else ""
    NC = "\033[0m" if _tty else ""


def warn(msg: str) -> None:
    print(f"{C.YELLOW}Warning:{C.NC} {msg}", file=sys.stderr)


def error(msg: str) -> None:
    print(f"{C.RED}Error:{C.NC} {msg}", file=sys.stderr)


def fail(msg: str, *, hint: str | None = None, code: int = 1) -> None:
    """Report *msg* (and an optional *hint* line) and terminate the run."""
    error(msg)
    if hint:
        print(hint, file=sys.stderr)
    sys.exit(code)
