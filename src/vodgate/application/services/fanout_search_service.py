"""Fan-out search across every active source.

One asyncio task is started per source. Each task issues a single GET
bounded by its own timeout, tags the returned items and hands back a
SearchChunk. Results are yielded in completion order, so the fastest
source reaches the client first. Once every task has settled, a single
SearchDone marker closes the stream.

A failing source (network error, timeout, malformed body) is logged and
dropped. It never cancels its siblings or fails the search. If the consumer
stops iterating early, every task that is still pending is cancelled.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Sequence

from vodgate.application.ports.upstream import UpstreamPort
from vodgate.domain.search.value_objects import (
    SearchChunk,
    SearchDone,
    SearchEvent,
    SearchQuery,
)
from vodgate.domain.shared.exceptions import ErrorCode, UpstreamError
from vodgate.domain.sources.value_objects import Source

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_TIMEOUT = 8.0


class FanOutSearchService:
    """Concurrent search over a set of sources with a streamed result."""

    def __init__(
        self,
        upstream: UpstreamPort,
        source_timeout: float = DEFAULT_SOURCE_TIMEOUT,
    ):
        self._upstream = upstream
        self._source_timeout = source_timeout

    @property
    def source_timeout(self) -> float:
        return self._source_timeout

    def search(
        self,
        keyword: str | None,
        sources: Sequence[Source],
    ) -> AsyncIterator[SearchEvent]:
        """Yield one SearchChunk per successful source, then SearchDone.

        Raises MissingParameterError before any network activity when the
        keyword is empty.
        """
        query = SearchQuery.parse(keyword)
        return self._stream(query, [s for s in sources if s.active])

    async def _stream(
        self,
        query: SearchQuery,
        sources: list[Source],
    ) -> AsyncIterator[SearchEvent]:
        started = time.monotonic()
        tasks = [
            asyncio.create_task(
                self._search_source(source, query),
                name=f"search:{source.key}",
            )
            for source in sources
        ]
        succeeded = 0
        try:
            for next_done in asyncio.as_completed(tasks):
                chunk = await next_done
                if chunk is None:
                    continue
                succeeded += 1
                if len(chunk) == 0:
                    continue
                yield chunk
        finally:
            pending = [t for t in tasks if not t.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
                logger.info(
                    "Search '%s' abandoned; cancelled %d pending source(s)",
                    query.keyword,
                    len(pending),
                )

        logger.info(
            "Search '%s' finished: %d/%d source(s) answered in %.1fms",
            query.keyword,
            succeeded,
            len(sources),
            (time.monotonic() - started) * 1000,
        )
        yield SearchDone(sources_total=len(sources), sources_succeeded=succeeded)

    async def _search_source(
        self,
        source: Source,
        query: SearchQuery,
    ) -> SearchChunk | None:
        """Run one worker; None means the source failed and is dropped."""
        t0 = time.monotonic()
        try:
            chunk = await asyncio.wait_for(
                self._fetch_chunk(source, query),
                timeout=self._source_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Source '%s' timed out after %.1fs",
                source.key,
                self._source_timeout,
            )
            return None
        except UpstreamError as e:
            logger.warning(
                "Source '%s' failed (code=%s): %s",
                source.key,
                e.code.value,
                e.message,
            )
            return None
        except Exception as e:
            logger.warning(
                "Source '%s' failed unexpectedly (%s): %s",
                source.key,
                type(e).__name__,
                e,
            )
            return None

        logger.debug(
            "Source '%s' returned %d item(s) in %.1fms",
            source.key,
            len(chunk),
            (time.monotonic() - t0) * 1000,
        )
        return chunk

    async def _fetch_chunk(self, source: Source, query: SearchQuery) -> SearchChunk:
        payload = await self._upstream.get_json(
            source.search_url(query.keyword),
            timeout=self._source_timeout,
        )
        items = payload.get("list") if isinstance(payload, dict) else None
        if items is None:
            items = []
        if not isinstance(items, list):
            raise UpstreamError(
                "Result list is not an array",
                ErrorCode.UPSTREAM_MALFORMED,
                {"source": source.key, "type": type(items).__name__},
            )
        return SearchChunk.from_upstream(source, items)
