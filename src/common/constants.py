"""Shared constants for numstat."""

# ── Output precision ────────────────────────────────────────────────────────
DEFAULT_PRECISION = 4
MIN_PRECISION = 0
MAX_PRECISION = 10

# ── Order statistics ────────────────────────────────────────────────────────
# (field_name, fraction) evaluated on the sorted sample
QUARTILES: list[tuple[str, float]] = [
    ("q1", 0.25),
    ("median", 0.50),
    ("q3", 0.75),
]

# Stdin placeholder accepted as FILE
STDIN_PATH = "-"
