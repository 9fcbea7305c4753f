"""Shared fixtures: fake clock and in-memory FotMob / bootstrap transports."""

import asyncio

import httpx
import pytest

from services.cache import TTLCache
from services.fotmob import FotmobClient

TOKEN = "dynamic-xmas-token"


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeBootstrap:
    """Stands in for the x-mas bootstrap service."""

    def __init__(self, body=None, status_code=200, error=None, delay=0.0):
        self.body = {"x-mas": TOKEN} if body is None else body
        self.status_code = status_code
        self.error = error
        self.delay = delay
        self.requests: list[httpx.Request] = []

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error(f"bootstrap {self.error.__name__}", request=request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class FakeFotmob:
    """Stands in for the FotMob API; echoes what it was asked for."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("upstream unreachable", request=request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": "nope"})
        return httpx.Response(
            200,
            json={
                "endpoint": request.url.path.rsplit("/", 1)[-1],
                "params": dict(request.url.params),
                "call": len(self.requests),
            },
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def bootstrap() -> FakeBootstrap:
    return FakeBootstrap()


@pytest.fixture
def upstream() -> FakeFotmob:
    return FakeFotmob()


@pytest.fixture
def client(bootstrap, upstream, clock) -> FotmobClient:
    return FotmobClient.from_settings(
        cache=TTLCache(clock=clock),
        transport=upstream.transport,
        bootstrap_transport=bootstrap.transport,
    )
