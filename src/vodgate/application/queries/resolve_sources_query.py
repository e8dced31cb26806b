"""Resolve sources query - build the list of search sources for a request.

Resolution tiers, first success wins:

1. ``SITES_JSON``: inline JSON, or Base64-encoded JSON when direct
   parsing fails.
2. ``REMOTE_DB_URL``: fetched live on every call, used only on a 2xx
   response with a parseable body.
3. The built-in fallback catalogue.

A tier succeeds when it yields a ``{"sites": [...]}`` document with at
least one valid entry. Failing tiers are logged and skipped; resolution
itself never raises.
"""

from __future__ import annotations

import base64
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from vodgate.application.ports.upstream import UpstreamPort
from vodgate.domain.shared.exceptions import SourceNotFoundError, UpstreamError
from vodgate.domain.sources.value_objects import Source
from vodgate_config.settings import Settings

logger = logging.getLogger(__name__)


DEFAULT_SITES: dict[str, Any] = {
    "sites": [
        {
            "key": "ffzy",
            "name": "非凡资源",
            "api": "https://api.ffzyapi.com/api.php/provide/vod/",
            "active": True,
        },
        {
            "key": "lzzy",
            "name": "量子资源",
            "api": "https://cj.lziapi.com/api.php/provide/vod/",
            "active": True,
        },
        {
            "key": "snzy",
            "name": "索尼资源",
            "api": "https://suoniapi.com/api.php/provide/vod/",
            "active": True,
        },
    ],
}


class SourceOrigin(str, Enum):
    """Which configuration tier produced the source list."""

    INLINE = "inline"
    REMOTE = "remote"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class SourceRegistry:
    """Result of resolving sources for one request."""

    sources: tuple[Source, ...]
    origin: SourceOrigin

    def active(self) -> list[Source]:
        return [s for s in self.sources if s.active]

    def find(self, key: str | None) -> Source:
        for source in self.sources:
            if source.key == key:
                return source
        raise SourceNotFoundError(key)

    def to_wire(self) -> dict[str, Any]:
        return {"sites": [s.to_wire() for s in self.sources]}


def decode_inline_catalogue(raw: str) -> Any | None:
    """Decode an inline catalogue given as JSON or Base64-encoded JSON."""
    try:
        return json.loads(raw)
    except ValueError:
        pass
    try:
        decoded = base64.b64decode(raw.strip()).decode("utf-8")
        return json.loads(decoded)
    except ValueError:
        return None


def parse_catalogue(payload: Any) -> list[Source]:
    """Validate a ``{"sites": [...]}`` document, dropping invalid entries."""
    if not isinstance(payload, dict):
        return []
    entries = payload.get("sites")
    if not isinstance(entries, list):
        return []

    sources: list[Source] = []
    seen: set[str] = set()
    for entry in entries:
        try:
            source = Source.model_validate(entry)
        except PydanticValidationError as e:
            logger.warning(
                "Skipping invalid source entry %r: %d error(s)",
                entry,
                e.error_count(),
            )
            continue
        if source.key in seen:
            logger.warning("Skipping duplicate source key '%s'", source.key)
            continue
        seen.add(source.key)
        sources.append(source)
    return sources


class ResolveSourcesQuery:
    """Query to resolve the current source registry."""

    def __init__(self, settings: Settings, upstream: UpstreamPort):
        self._settings = settings
        self._upstream = upstream

    async def execute(self) -> SourceRegistry:
        inline = self._from_inline()
        if inline:
            return self._registry(inline, SourceOrigin.INLINE)

        remote = await self._from_remote()
        if remote:
            return self._registry(remote, SourceOrigin.REMOTE)

        return self._registry(parse_catalogue(DEFAULT_SITES), SourceOrigin.FALLBACK)

    def _registry(self, sources: list[Source], origin: SourceOrigin) -> SourceRegistry:
        logger.debug("Resolved %d source(s) from %s tier", len(sources), origin.value)
        return SourceRegistry(sources=tuple(sources), origin=origin)

    def _from_inline(self) -> list[Source]:
        raw = self._settings.sites_json
        if not raw:
            return []
        payload = decode_inline_catalogue(raw)
        if payload is None:
            logger.warning("SITES_JSON is neither JSON nor Base64 JSON; ignoring it")
            return []
        sources = parse_catalogue(payload)
        if not sources:
            logger.warning("SITES_JSON contains no usable sources; ignoring it")
        return sources

    async def _from_remote(self) -> list[Source]:
        url = self._settings.remote_db_url
        if not url:
            return []
        try:
            response = await self._upstream.get_text(url)
        except UpstreamError as e:
            logger.warning("Remote source catalogue unavailable: %s", e.message)
            return []
        if not response.ok:
            logger.warning(
                "Remote source catalogue returned HTTP %d; ignoring it",
                response.status_code,
            )
            return []
        try:
            payload = json.loads(response.text)
        except ValueError:
            logger.warning("Remote source catalogue is not valid JSON; ignoring it")
            return []
        sources = parse_catalogue(payload)
        if not sources:
            logger.warning("Remote source catalogue contains no usable sources")
        return sources
