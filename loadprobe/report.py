from typing import Optional

from .models import SeriesStats, SummaryStats


def _num(v: Optional[float]) -> str:
    return "n/a" if v is None else f"{v}"


def _triple(label: str, s: SeriesStats) -> str:
    return f"{label} (Min, Max, Mean).....: {_num(s.min)}, {_num(s.max)}, {_num(s.mean)},"


def format_report(summary: SummaryStats) -> str:
    lines = [
        f"Successful calls.............................: {summary.successful_count}",
        f"Failed calls.................................: {summary.failed_count}",
        f"Requests per second..........................: {_num(summary.requests_per_second)}",
        f"P95 Time to First Byte (s)...................: {_num(summary.p95)}",
        f"P99 Time to First Byte (s)...................: {_num(summary.p99)}",
        _triple("Total Request Time (s)", summary.total_time),
        _triple("Time to First Byte (s)", summary.ttfb),
        _triple("Time to Last Byte (s)", summary.ttlb),
    ]
    if not summary.has_data:
        lines.append("No successful calls: timing statistics are empty.")
    return "\n".join(lines)
