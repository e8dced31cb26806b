"""HTTP client for upstream sources, metadata APIs and proxied media."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from typing import Any

import httpx

from vodgate.application.ports.upstream import (
    UpstreamPort,
    UpstreamStream,
    UpstreamText,
)
from vodgate.domain.shared.exceptions import ErrorCode, UpstreamError

logger = logging.getLogger(__name__)


def _translate(url: str, exc: Exception) -> UpstreamError:
    if isinstance(exc, httpx.TimeoutException):
        return UpstreamError(
            f"Upstream timed out: {url}",
            ErrorCode.UPSTREAM_TIMEOUT,
            {"url": url},
        )
    return UpstreamError(
        f"Upstream request failed ({type(exc).__name__}): {exc}",
        ErrorCode.UPSTREAM_FAILED,
        {"url": url},
    )


class HttpxUpstreamStream(UpstreamStream):
    """Adapter around an httpx response opened with ``stream=True``."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def content_type(self) -> str:
        return self._response.headers.get("Content-Type", "")

    async def aiter_bytes(self) -> AsyncIterator[bytes]:
        async for chunk in self._response.aiter_bytes():
            yield chunk

    async def aread(self) -> bytes:
        try:
            return await self._response.aread()
        except httpx.HTTPError as e:
            raise _translate(str(self._response.url), e) from e

    async def aclose(self) -> None:
        await self._response.aclose()


class UpstreamClient(UpstreamPort):
    """httpx wrapper shared by every outbound call of the gateway.

    Transport-level failures are translated into UpstreamError so that
    callers never depend on httpx exception types.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def timeout(self) -> float:
        return self._timeout

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_json(
        self,
        url: str,
        *,
        timeout: float | None = None,
    ) -> Any:
        client = await self._get_client()
        try:
            response = await client.get(
                url,
                timeout=timeout if timeout is not None else self._timeout,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise _translate(url, e) from e

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                "Upstream returned a body that is not JSON",
                ErrorCode.UPSTREAM_MALFORMED,
                {"url": url, "status_code": response.status_code},
            ) from e

    async def get_text(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> UpstreamText:
        client = await self._get_client()
        try:
            response = await client.get(url, headers=dict(headers or {}))
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise _translate(url, e) from e
        return UpstreamText(
            status_code=response.status_code,
            text=response.text,
            content_type=response.headers.get("Content-Type", ""),
        )

    async def open_stream(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> HttpxUpstreamStream:
        client = await self._get_client()
        try:
            request = client.build_request("GET", url, headers=dict(headers or {}))
            response = await client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise _translate(url, e) from e
        logger.debug(
            "Opened upstream stream %s -> %d (%s)",
            url,
            response.status_code,
            response.headers.get("Content-Type", "-"),
        )
        return HttpxUpstreamStream(response)
