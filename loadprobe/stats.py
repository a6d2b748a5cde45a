from __future__ import annotations

import math
from decimal import Decimal, ROUND_DOWN
from typing import List, Sequence

from .models import LoadResult, SeriesStats, SummaryStats

_CENTS = Decimal("0.01")


def truncate2(x: float) -> float:
    """
    Truncate toward zero to two decimals: 0.129 -> 0.12, 1.239 -> 1.23.

    Works on the shortest decimal repr of x rather than the literal
    trunc(x * 100) / 100. The two differ for values such as 0.29: the
    literal formula sees 28.999999999999996 and yields 0.28, while this
    returns 0.29. Keep it this way; the literal formula is not idempotent
    (truncate2(0.2999) would be 0.29, then 0.28 on a second pass).
    """
    return float(Decimal(repr(float(x))).quantize(_CENTS, rounding=ROUND_DOWN))


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def percentile(values: Sequence[float], p: float) -> float:
    """Nearest-rank percentile over a 0-based sorted copy; 0.0 for no data."""
    if not 0 <= p <= 100:
        raise ValueError(f"percentile must be within [0, 100], got {p}")
    if not values:
        return 0.0
    ordered = sorted(values)
    idx = _round_half_up(p / 100.0 * (len(ordered) - 1))
    return ordered[idx]


def series_stats(values: Sequence[float]) -> SeriesStats:
    if not values:
        return SeriesStats(min=None, max=None, mean=0.0)
    return SeriesStats(
        min=truncate2(min(values)),
        max=truncate2(max(values)),
        mean=truncate2(sum(values) / len(values)),
    )


def throughput(successful_count: int, duration_s: float) -> float:
    # only successful calls count towards throughput
    if duration_s <= 0:
        return 0.0
    return successful_count / duration_s


def reduce(result: LoadResult) -> SummaryStats:
    ttfb: List[float] = [s.ttfb for s in result.samples]
    ttlb: List[float] = [s.ttlb for s in result.samples]
    total: List[float] = [s.total_time for s in result.samples]

    return SummaryStats(
        successful_count=result.successful_count,
        failed_count=result.failed_count,
        requests_per_second=truncate2(throughput(result.successful_count, result.duration_s)),
        p95=truncate2(percentile(ttfb, 95)),
        p99=truncate2(percentile(ttfb, 99)),
        total_time=series_stats(total),
        ttfb=series_stats(ttfb),
        ttlb=series_stats(ttlb),
    )
