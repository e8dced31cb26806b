"""Fake upstream hosts backed by httpx.MockTransport."""

import asyncio
import inspect
from collections.abc import Awaitable, Callable

import httpx

from vodgate.domain.sources import Source
from vodgate.infrastructure.http import UpstreamClient

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


class FakeUpstream:
    """Routes outbound requests to per-host handlers and records them."""

    def __init__(self) -> None:
        self.routes: dict[str, Handler] = {}
        self.requests: list[httpx.Request] = []
        self.cancelled: list[str] = []

    def route(self, host: str, handler: Handler) -> "FakeUpstream":
        self.routes[host] = handler
        return self

    def json(self, host: str, payload, status_code: int = 200) -> "FakeUpstream":
        return self.route(host, lambda request: httpx.Response(status_code, json=payload))

    def slow(self, host: str, delay: float, payload) -> "FakeUpstream":
        async def handler(request: httpx.Request) -> httpx.Response:
            try:
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                self.cancelled.append(host)
                raise
            return httpx.Response(200, json=payload)

        return self.route(host, handler)

    def failing(self, host: str) -> "FakeUpstream":
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        return self.route(host, handler)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.host)
        if handler is None:
            return httpx.Response(404, text="no route")
        result = handler(request)
        if inspect.isawaitable(result):
            result = await result
        return result

    def client(self, timeout: float = 5.0) -> UpstreamClient:
        return UpstreamClient(timeout=timeout, transport=httpx.MockTransport(self))

    def hosts(self) -> list[str]:
        return [r.url.host for r in self.requests]


def make_source(key: str, *, active: bool = True, name: str | None = None) -> Source:
    """Build a source whose endpoint lives on host ``{key}.example``."""
    return Source(
        key=key,
        name=name or f"Source {key}",
        api=f"https://{key}.example/api.php/provide/vod/",
        active=active,
    )


def vod_items(*names: str) -> dict:
    """A catalogue API search response listing ``names``."""
    return {
        "code": 1,
        "list": [
            {"vod_id": i + 1, "vod_name": name, "vod_remarks": "HD"}
            for i, name in enumerate(names)
        ],
    }
