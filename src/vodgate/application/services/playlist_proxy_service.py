"""Forward proxy with HLS playlist rewriting.

The target is fetched once with a browser-like User-Agent. Playlists are
buffered, rewritten so that every referenced resource routes back through
the proxy, and returned with the canonical playlist media type. Any other
payload is relayed chunk by chunk with the upstream Content-Type.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass

from vodgate.application.ports.upstream import UpstreamPort, UpstreamStream
from vodgate.domain.playlist.rewriter import (
    PLAYLIST_MEDIA_TYPE,
    PlaylistRewriter,
    is_playlist,
)
from vodgate.domain.shared.exceptions import MissingParameterError

logger = logging.getLogger(__name__)


@dataclass
class ProxyPayload:
    """What the proxy hands back to the transport layer.

    Exactly one of ``body`` (rewritten playlist) and ``body_stream``
    (relayed bytes) is set.
    """

    content_type: str
    body: bytes | None = None
    body_stream: AsyncIterator[bytes] | None = None

    @property
    def rewritten(self) -> bool:
        return self.body is not None


async def relay_stream(stream: UpstreamStream) -> AsyncIterator[bytes]:
    try:
        async for chunk in stream.aiter_bytes():
            yield chunk
    finally:
        await stream.aclose()


class PlaylistProxyService:
    """Fetch a target URL and rewrite it when it is a playlist."""

    def __init__(self, upstream: UpstreamPort, user_agent: str = "Mozilla/5.0"):
        self._upstream = upstream
        self._user_agent = user_agent

    async def proxy(self, target_url: str | None, proxy_base: str) -> ProxyPayload:
        """Proxy ``target_url``; ``proxy_base`` prefixes rewritten references.

        ``proxy_base`` ends with the query parameter name, for example
        ``https://gateway.example/api/cors?url=``.
        """
        if not target_url:
            raise MissingParameterError("url")

        stream = await self._upstream.open_stream(
            target_url,
            headers={"User-Agent": self._user_agent},
        )
        content_type = stream.content_type

        if not is_playlist(target_url, content_type):
            return ProxyPayload(content_type=content_type, body_stream=relay_stream(stream))

        try:
            raw = await stream.aread()
        finally:
            await stream.aclose()

        text = raw.decode("utf-8-sig", errors="replace")
        rewritten = PlaylistRewriter(proxy_base).rewrite(text, target_url)
        logger.debug(
            "Rewrote playlist %s (%d -> %d chars)",
            target_url,
            len(text),
            len(rewritten),
        )
        return ProxyPayload(
            content_type=PLAYLIST_MEDIA_TYPE,
            body=rewritten.encode("utf-8"),
        )
