from prometheus_client import Counter, Histogram

REQS = Counter("loadprobe_requests_total", "Requests issued", ["outcome"])
FAILS = Counter("loadprobe_failures_total", "Failed requests", ["reason"])
ROUNDS = Counter("loadprobe_rounds_total", "Completed rounds")

_BUCKETS = [0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30]

TTFB = Histogram("loadprobe_ttfb_seconds", "Time to first byte", buckets=_BUCKETS)
TTLB = Histogram("loadprobe_ttlb_seconds", "Time to last byte", buckets=_BUCKETS)
