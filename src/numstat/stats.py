"""Descriptive statistics over a buffered sample (stdlib only, no numpy needed)."""

from __future__ import annotations

import math
from dataclasses import dataclass

import structlog

from src.common.constants import QUARTILES

log = structlog.get_logger("numstat.stats")


@dataclass(frozen=True)
class Stats:
    """Summary of one sample.  ``variance``/``stddev`` are population values."""

    count: int
    sum: float
    mean: float
    min: float
    max: float
    range: float
    median: float
    q1: float
    q3: float
    variance: float
    stddev: float


def percentile(sorted_values: list[float], fraction: float) -> float:
    """Linearly interpolated percentile at rank ``fraction * (n - 1)``.

    *sorted_values* must be ascending.  ``percentile(v, 0.5)`` of ``[1, 2, 3, 4]``
    is ``2.5``; a single-element list always yields that element.
    """
    n = len(sorted_values)
    if n == 0:
        raise ValueError("percentile() of an empty sequence")
    if n == 1:
        return sorted_values[0]

    rank = fraction * (n - 1)
    lower = int(math.floor(rank))
    upper = lower + 1
    if upper >= n:
        return sorted_values[n - 1]

    weight = rank - lower
    return sorted_values[lower] * (1 - weight) + sorted_values[upper] * weight


def population_variance(values: list[float], mean: float) -> float:
    return sum((x - mean) ** 2 for x in values) / len(values)


def compute_stats(values: list[float]) -> Stats:
    """Compute the full summary of *values*.

    *values* must be non-empty and is sorted in place.
    """
    if not values:
        raise ValueError("compute_stats() requires at least one value")

    count = len(values)
    total = 0.0
    lo = hi = values[0]
    for x in values:
        total += x
        if x < lo:
            lo = x
        if x > hi:
            hi = x

    avg = total / count
    variance = population_variance(values, avg)

    values.sort()
    order = {name: percentile(values, fraction) for name, fraction in QUARTILES}

    stats = Stats(
        count=count,
        sum=total,
        mean=avg,
        min=lo,
        max=hi,
        range=hi - lo,
        median=order["median"],
        q1=order["q1"],
        q3=order["q3"],
        variance=variance,
        stddev=math.sqrt(variance),
    )
    log.debug("stats_computed", count=count, mean=avg, stddev=stats.stddev)
    return stats
