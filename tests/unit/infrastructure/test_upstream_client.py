"""Tests for the httpx-backed upstream client."""

import httpx
import pytest

from vodgate.domain.shared import ErrorCode, UpstreamError
from vodgate.infrastructure.http import UpstreamClient


def _client(handler) -> UpstreamClient:
    return UpstreamClient(timeout=1.0, transport=httpx.MockTransport(handler))


class TestUpstreamClientInit:
    """Tests for client construction."""

    def test_default_timeout(self):
        assert UpstreamClient().timeout == 30.0

    async def test_close_without_requests_is_a_noop(self):
        client = UpstreamClient()

        await client.close()


class TestGetJson:
    """Tests for JSON requests."""

    async def test_decodes_body_regardless_of_status(self):
        client = _client(lambda request: httpx.Response(404, json={"list": []}))

        assert await client.get_json("https://a.example/") == {"list": []}

    async def test_non_json_body_is_malformed(self):
        client = _client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(UpstreamError) as exc_info:
            await client.get_json("https://a.example/")

        assert exc_info.value.code == ErrorCode.UPSTREAM_MALFORMED

    async def test_connection_error_is_translated(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamError) as exc_info:
            await _client(handler).get_json("https://a.example/")

        assert exc_info.value.code == ErrorCode.UPSTREAM_FAILED
        assert exc_info.value.details == {"url": "https://a.example/"}

    async def test_timeout_is_translated(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(UpstreamError) as exc_info:
            await _client(handler).get_json("https://a.example/")

        assert exc_info.value.code == ErrorCode.UPSTREAM_TIMEOUT


class TestGetText:
    """Tests for text requests."""

    async def test_returns_status_body_and_content_type(self):
        client = _client(
            lambda request: httpx.Response(
                503, text="down", headers={"Content-Type": "text/plain"}
            )
        )

        result = await client.get_text("https://a.example/")

        assert result.status_code == 503
        assert result.text == "down"
        assert result.content_type.startswith("text/plain")
        assert result.ok is False

    async def test_forwards_headers(self):
        seen = {}

        def handler(request):
            seen.update(request.headers)
            return httpx.Response(200, text="ok")

        await _client(handler).get_text("https://a.example/", headers={"X-Test": "1"})

        assert seen["x-test"] == "1"


class TestOpenStream:
    """Tests for streamed responses."""

    async def test_streams_body_and_closes(self):
        client = _client(
            lambda request: httpx.Response(
                200, content=b"abcdef", headers={"Content-Type": "video/mp2t"}
            )
        )

        stream = await client.open_stream("https://a.example/seg.ts")
        try:
            body = b"".join([chunk async for chunk in stream.aiter_bytes()])
        finally:
            await stream.aclose()

        assert stream.status_code == 200
        assert stream.content_type == "video/mp2t"
        assert body == b"abcdef"

    async def test_missing_content_type_is_empty(self):
        client = _client(lambda request: httpx.Response(200, content=b"x"))

        stream = await client.open_stream("https://a.example/")
        await stream.aclose()

        assert stream.content_type == ""

    async def test_follows_redirects(self):
        def handler(request):
            if request.url.path == "/old":
                return httpx.Response(302, headers={"Location": "https://a.example/new"})
            return httpx.Response(200, content=b"moved")

        stream = await _client(handler).open_stream("https://a.example/old")
        body = await stream.aread()
        await stream.aclose()

        assert body == b"moved"

    async def test_connection_error_is_translated(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamError):
            await _client(handler).open_stream("https://a.example/")
