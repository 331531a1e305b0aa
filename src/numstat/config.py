"""Run configuration data model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.common.constants import DEFAULT_PRECISION


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class Config:
    """Immutable settings for a single run, built once by ``parse_args``."""

    output_format: OutputFormat = OutputFormat.TEXT
    precision: int = DEFAULT_PRECISION
    input_path: str | None = None    # None reads standard input
    verbose: bool = False
