import asyncio

import httpx
import pytest

from loadprobe.scheduler import run_load

URL = "http://target.test/ping"


class Recorder:
    """MockTransport handler that counts calls and the peak number in flight."""

    def __init__(self, statuses=None, delay=0.01, fail_with=None, body_delay=None, chunks=10):
        self.statuses = list(statuses or [])
        self.delay = delay
        self.fail_with = fail_with
        self.body_delay = body_delay
        self.chunks = chunks
        self.calls = 0
        self.inflight = 0
        self.peak = 0

    async def _slow_body(self):
        # headers go out at once, then one byte per body_delay
        for _ in range(self.chunks):
            await asyncio.sleep(self.body_delay)
            yield b"x"

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        n = self.calls
        self.inflight += 1
        self.peak = max(self.peak, self.inflight)
        try:
            await asyncio.sleep(self.delay)
            if self.fail_with is not None:
                raise self.fail_with("boom", request=request)
            status = self.statuses[n - 1] if n <= len(self.statuses) else 200
            if self.body_delay is not None:
                return httpx.Response(status, content=self._slow_body())
            return httpx.Response(status, content=b"ok")
        finally:
            self.inflight -= 1


async def _run(handler, total, concurrency, **kw):
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        return await run_load(URL, total, concurrency, client=client, **kw)


@pytest.fixture
def recorder():
    return Recorder


@pytest.fixture
def run_mocked():
    def go(handler, total, concurrency, **kw):
        return asyncio.run(_run(handler, total, concurrency, **kw))
    return go
