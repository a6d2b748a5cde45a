import asyncio
import time
from typing import Callable, List, Optional

import httpx

from .accumulator import fold
from .errors import ConfigError
from .issuer import issue
from .log import debug
from .models import LoadResult
from .settings import settings
from .telemetry import ROUNDS

RoundHook = Callable[[int, int, LoadResult], None]


def validate(url: str, total: int, concurrency: int, timeout_s: float) -> None:
    if not (url or "").strip():
        raise ConfigError("url must not be empty")
    if total < 0:
        raise ConfigError(f"number must be >= 0, got {total}")
    if concurrency < 1:
        raise ConfigError(f"concurrency must be >= 1, got {concurrency}")
    if timeout_s <= 0:
        raise ConfigError(f"timeout must be > 0, got {timeout_s}")


def plan_rounds(total: int, concurrency: int) -> List[int]:
    """Round sizes: total // concurrency full rounds, then the remainder if any."""
    if concurrency < 1:
        raise ConfigError(f"concurrency must be >= 1, got {concurrency}")
    full, rest = divmod(total, concurrency)
    rounds = [concurrency] * full
    if rest > 0:
        rounds.append(rest)
    return rounds


def _build_client(concurrency: int, timeout_s: float) -> httpx.AsyncClient:
    # pool sized to the round so peak in-flight requests is exactly `concurrency`
    limits = httpx.Limits(max_connections=concurrency, max_keepalive_connections=concurrency)
    debug(f"client: timeout={timeout_s}s max_connections={concurrency} "
          f"follow_redirects={settings.follow_redirects}")
    return httpx.AsyncClient(
        timeout=timeout_s,
        limits=limits,
        follow_redirects=settings.follow_redirects,
    )


async def _run_rounds(client: httpx.AsyncClient, url: str, rounds: List[int], timeout_s: float,
                      on_round: Optional[RoundHook]) -> LoadResult:
    result = LoadResult()
    started = time.perf_counter()
    for i, size in enumerate(rounds):
        # barrier: the next round starts only after every call in this one is back
        outcomes = await asyncio.gather(*(issue(client, url, timeout_s) for _ in range(size)))
        fold(result, outcomes)
        ROUNDS.inc()
        if on_round is not None:
            on_round(i, size, result)
    result.duration_s = time.perf_counter() - started
    return result


async def run_load(
    url: str,
    total: int,
    concurrency: int,
    *,
    timeout_s: Optional[float] = None,
    client: Optional[httpx.AsyncClient] = None,
    on_round: Optional[RoundHook] = None,
) -> LoadResult:
    """
    Issue `total` GETs against `url` in strictly sequential rounds of at most
    `concurrency` concurrent calls and return the folded result.

    Raises ConfigError before any request when the configuration is invalid.
    Per-request failures never abort the run. timeout_s (default from
    settings) bounds each request end to end, body included.
    """
    timeout_s = settings.timeout_s if timeout_s is None else timeout_s
    validate(url, total, concurrency, timeout_s)
    rounds = plan_rounds(total, concurrency)

    if client is not None:
        return await _run_rounds(client, url, rounds, timeout_s, on_round)
    async with _build_client(concurrency, timeout_s) as own:
        return await _run_rounds(own, url, rounds, timeout_s, on_round)


def run(url: str, total: int, concurrency: int, **kwargs) -> LoadResult:
    return asyncio.run(run_load(url, total, concurrency, **kwargs))
