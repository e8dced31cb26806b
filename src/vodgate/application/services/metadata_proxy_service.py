"""Pass-through access to the TMDB metadata API and image CDN."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from urllib.parse import urlencode

from vodgate.application.ports.upstream import UpstreamPort, UpstreamStream, UpstreamText
from vodgate.domain.shared.exceptions import ConfigurationError
from vodgate_config.settings import Settings

logger = logging.getLogger(__name__)

_RESERVED_PARAMS = frozenset({"path", "api_key", "language"})


class MetadataProxyService:
    """Forwards metadata and image requests with the server-side API key."""

    def __init__(
        self,
        upstream: UpstreamPort,
        api_key: str | None,
        api_base: str = "https://api.themoviedb.org/3",
        image_base: str = "https://image.tmdb.org/t/p",
        language: str = "zh-CN",
    ):
        self._upstream = upstream
        self._api_key = api_key
        self._api_base = api_base.rstrip("/")
        self._image_base = image_base.rstrip("/")
        self._language = language

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        upstream: UpstreamPort,
    ) -> MetadataProxyService:
        key = settings.tmdb_api_key.get_secret_value() if settings.tmdb_api_key else None
        return cls(
            upstream=upstream,
            api_key=key,
            api_base=settings.tmdb_api_base,
            image_base=settings.tmdb_image_base,
            language=settings.tmdb_language,
        )

    def build_api_url(self, path: str, params: Iterable[tuple[str, str]]) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        forwarded = [(k, v) for k, v in params if k not in _RESERVED_PARAMS]
        forwarded.append(("api_key", self._api_key or ""))
        forwarded.append(("language", self._language))
        return f"{self._api_base}{path}?{urlencode(forwarded)}"

    def build_image_url(self, size: str, file_name: str) -> str:
        return f"{self._image_base}/{size}/{file_name}"

    async def fetch(
        self,
        path: str | None,
        params: Iterable[tuple[str, str]],
    ) -> UpstreamText:
        if not path or not self._api_key:
            raise ConfigurationError("Missing TMDB Config")
        url = self.build_api_url(path, params)
        logger.debug("Forwarding metadata request for %s", path)
        return await self._upstream.get_text(url)

    async def open_image(self, size: str, file_name: str) -> UpstreamStream:
        return await self._upstream.open_stream(self.build_image_url(size, file_name))
