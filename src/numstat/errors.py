"""Error hierarchy for numstat runs.

Every error is terminal: ``cli.main`` reports it on stderr and exits with
the error's ``exit_code``.
"""

from __future__ import annotations

USAGE_HINT = "Use -h or --help for usage information"


class NumstatError(Exception):
    """Base class for all errors that abort a run."""

    exit_code = 1
    hint: str | None = None


class UsageError(NumstatError):
    """Bad flags, missing option argument, or too many input files."""

    hint = USAGE_HINT


class InputOpenError(NumstatError):
    """The input file could not be opened."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"Cannot open file '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class AllocationError(NumstatError):
    """Growing the sample buffer failed."""

    def __init__(self) -> None:
        super().__init__("Memory allocation failed")


class EmptyInputError(NumstatError):
    """The input contained no parseable numbers."""

    def __init__(self) -> None:
        super().__init__("No valid numbers found in input")
