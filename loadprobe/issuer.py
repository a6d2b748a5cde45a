import asyncio
import time
from typing import Optional

import httpx

from .log import debug
from .models import Outcome, RequestFailure, TimingSample


def _reason(exc: Exception) -> str:
    if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError)):
        return "timeout"
    if isinstance(exc, httpx.ConnectError):
        return "connect"
    if isinstance(exc, (httpx.ProtocolError, httpx.DecodingError)):
        return "protocol"
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return "invalid_url"
    return "transport"


async def _timed_get(client: httpx.AsyncClient, url: str) -> TimingSample:
    t0 = time.perf_counter()
    async with client.stream("GET", url) as resp:
        t1 = time.perf_counter()
        await resp.aread()
        t2 = time.perf_counter()
        status = resp.status_code
    return TimingSample(
        ttfb=t1 - t0,
        ttlb=t2 - t0,
        total_time=t2 - t0,
        status=status,
    )


async def issue(client: httpx.AsyncClient, url: str, timeout_s: Optional[float] = None) -> Outcome:
    """
    Perform one timed GET.

    ttfb is taken once status and headers are in, ttlb once the body has been
    drained. total_time shares the ttlb end timestamp, so
    ttfb <= ttlb == total_time always holds.
    timeout_s caps the whole request, body included; the client's own timeout
    only bounds each individual connect/read/write wait.
    Any response (2xx or not) becomes a TimingSample; transport errors and an
    expired timeout become a RequestFailure and are never raised.
    """
    try:
        if timeout_s is None:
            return await _timed_get(client, url)
        return await asyncio.wait_for(_timed_get(client, url), timeout_s)
    except asyncio.TimeoutError as e:
        debug(f"GET {url} exceeded {timeout_s}s")
        return RequestFailure(reason=_reason(e), detail=f"request exceeded {timeout_s}s")
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        reason = _reason(e)
        debug(f"GET {url} failed ({reason}): {e!r}")
        return RequestFailure(reason=reason, detail=str(e))
