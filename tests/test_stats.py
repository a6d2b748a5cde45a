import pytest

from loadprobe.models import LoadResult, TimingSample
from loadprobe.stats import percentile, reduce, series_stats, throughput, truncate2


@pytest.mark.parametrize("x,want", [
    (1.239, 1.23),
    (0.129, 0.12),
    (0.29, 0.29),
    (2.0, 2.0),
    (0.0, 0.0),
    (0.009, 0.0),
    (123.456789, 123.45),
])
def test_truncate2_truncates_toward_zero(x, want):
    assert truncate2(x) == want


@pytest.mark.parametrize("x", [0.1, 0.29, 0.2999, 1.005, 3.14159, 10.0 / 3, 1e-5, 987.654])
def test_truncate2_is_idempotent(x):
    once = truncate2(x)
    assert truncate2(once) == once
    assert once <= x


def test_percentile_nearest_rank():
    ttfb = [0.10, 0.20, 0.15, 0.40, 0.05]
    # sorted: [0.05, 0.10, 0.15, 0.20, 0.40]; round(0.95 * 4) = 4
    assert percentile(ttfb, 95) == 0.40
    assert percentile(ttfb, 99) == 0.40
    assert percentile(ttfb, 50) == 0.15
    # round(0.3 * 4) = round(1.2) = 1
    assert percentile(ttfb, 30) == 0.10


def test_percentile_bounds_are_min_and_max():
    vals = [3.0, 1.0, 2.0, 9.0]
    assert percentile(vals, 0) == 1.0
    assert percentile(vals, 100) == 9.0


def test_percentile_rounds_half_up():
    # 0.25 * (3 - 1) = 0.5 rounds up to index 1
    assert percentile([1.0, 2.0, 3.0], 25) == 2.0


def test_percentile_does_not_mutate_input():
    vals = [0.3, 0.1, 0.2]
    percentile(vals, 95)
    assert vals == [0.3, 0.1, 0.2]


def test_percentile_empty_and_out_of_range():
    assert percentile([], 95) == 0.0
    with pytest.raises(ValueError):
        percentile([1.0], 101)


def test_series_stats():
    s = series_stats([0.129, 0.5, 0.201])
    assert (s.min, s.max) == (0.12, 0.5)
    # mean 0.276666... truncates to 0.27
    assert s.mean == 0.27


def test_series_stats_empty_is_no_data():
    s = series_stats([])
    assert s.min is None and s.max is None and s.mean == 0.0


def test_throughput_counts_successes_only():
    assert throughput(10, 2.0) == 5.0
    assert throughput(0, 2.0) == 0.0
    assert throughput(5, 0.0) == 0.0


def _sample(ttfb, ttlb):
    return TimingSample(ttfb=ttfb, ttlb=ttlb, total_time=ttlb, status=200)


def test_reduce():
    pairs = [(0.10, 0.30), (0.20, 0.35), (0.15, 0.25), (0.40, 0.90), (0.06, 0.16)]
    result = LoadResult(
        successful_count=5,
        failed_count=2,
        samples=[_sample(ttfb, ttlb) for ttfb, ttlb in pairs],
        duration_s=2.0,
    )
    summary = reduce(result)
    assert summary.successful_count == 5 and summary.failed_count == 2
    assert summary.requests_per_second == 2.5
    assert summary.p95 == 0.40 and summary.p99 == 0.40
    assert (summary.ttfb.min, summary.ttfb.max) == (0.06, 0.40)
    # 0.91 / 5 = 0.182
    assert summary.ttfb.mean == 0.18
    assert (summary.ttlb.min, summary.ttlb.max) == (0.16, 0.9)
    assert summary.total_time.max == 0.9
    assert summary.has_data


def test_reduce_without_samples_does_not_crash():
    summary = reduce(LoadResult(successful_count=0, failed_count=4, duration_s=1.0))
    assert not summary.has_data
    assert summary.p95 == 0.0 and summary.p99 == 0.0
    assert summary.requests_per_second == 0.0
    for series in (summary.total_time, summary.ttfb, summary.ttlb):
        assert series.min is None and series.max is None and series.mean == 0.0
