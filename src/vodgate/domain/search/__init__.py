"""Search domain."""

from vodgate.domain.search.value_objects import (
    SearchChunk,
    SearchDone,
    SearchEvent,
    SearchEventType,
    SearchQuery,
    tag_item,
)

__all__ = [
    "SearchChunk",
    "SearchDone",
    "SearchEvent",
    "SearchEventType",
    "SearchQuery",
    "tag_item",
]
