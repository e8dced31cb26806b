"""Fan-out search endpoint streaming results as Server-Sent Events."""

import json
import logging
from contextlib import aclosing
from typing import Any

from fastapi import APIRouter, Query
from fastapi.responses import StreamingResponse

from vodgate.domain.search import SearchChunk, SearchEvent, SearchEventType, SearchQuery
from vodgate.presentation.api.dependencies import ResolveSourcesDep, SearchServiceDep

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/search",
    summary="Search every active source",
    responses={
        200: {"description": "SSE stream of per-source result chunks"},
        400: {"description": "Missing search keyword"},
    },
)
async def search(
    resolve_sources: ResolveSourcesDep,
    service: SearchServiceDep,
    wd: str | None = Query(None, description="Search keyword"),
) -> StreamingResponse:
    """
    Search all active sources concurrently and stream results as they arrive.

    ## Event Types

    - unnamed `message` events: one per source that answered with a
      non-empty list. `data` is the list of items, each tagged with
      `site_key` and `site_name`.
    - `done`: sent exactly once after every source finished, failed or
      timed out. `data` is `{}`.

    Sources that fail or exceed the per-source timeout are skipped
    silently. Closing the connection cancels outstanding source requests.
    """
    query = SearchQuery.parse(wd)
    registry = await resolve_sources.execute()
    events = service.search(query.keyword, registry.active())

    async def event_generator():
        async with aclosing(events):
            async for event in events:
                yield _format_sse_event(event)

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


def _format_sse_event(event: SearchEvent) -> str:
    """Format a search event as a Server-Sent Event frame."""
    payload: Any = event.to_payload()
    data = json.dumps(payload, ensure_ascii=False)
    if isinstance(event, SearchChunk):
        return f"data: {data}\n\n"
    return f"event: {SearchEventType.DONE.value}\ndata: {data}\n\n"
