"""Source detail query - fetch one item's detail record from its source."""

from __future__ import annotations

import logging

from vodgate.application.ports.upstream import UpstreamPort, UpstreamText
from vodgate.application.queries.resolve_sources_query import ResolveSourcesQuery
from vodgate.domain.shared.exceptions import MissingParameterError

logger = logging.getLogger(__name__)


class SourceDetailQuery:
    """Query to pass a detail lookup through to the owning source."""

    def __init__(self, resolve_sources: ResolveSourcesQuery, upstream: UpstreamPort):
        self._resolve_sources = resolve_sources
        self._upstream = upstream

    async def execute(self, site_key: str | None, item_id: str | None) -> UpstreamText:
        registry = await self._resolve_sources.execute()
        source = registry.find(site_key)
        if not item_id:
            raise MissingParameterError("id")
        logger.debug("Fetching detail %s from source '%s'", item_id, source.key)
        return await self._upstream.get_text(source.detail_url(item_id))
