from typing import Iterable

from .models import LoadResult, Outcome, TimingSample
from .telemetry import REQS, FAILS, TTFB, TTLB


def is_success(status: int) -> bool:
    return 200 <= status < 300


def fold(result: LoadResult, outcomes: Iterable[Outcome]) -> LoadResult:
    """Fold one round's outcomes into the running result (mutates and returns it)."""
    for out in outcomes:
        if isinstance(out, TimingSample) and is_success(out.status):
            result.successful_count += 1
            result.samples.append(out)
            REQS.labels(outcome="success").inc()
            TTFB.observe(out.ttfb)
            TTLB.observe(out.ttlb)
            continue

        result.failed_count += 1
        REQS.labels(outcome="failure").inc()
        if isinstance(out, TimingSample):
            FAILS.labels(reason=f"http_{out.status}").inc()
        else:
            FAILS.labels(reason=out.reason).inc()
    return result
