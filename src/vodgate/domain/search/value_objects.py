"""Search query and stream event value objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from vodgate.domain.shared.exceptions import MissingParameterError
from vodgate.domain.sources.value_objects import Source


class SearchEventType(str, Enum):
    """Types of events on a search stream."""

    CHUNK = "chunk"
    DONE = "done"


@dataclass(frozen=True)
class SearchQuery:
    """A validated search request."""

    keyword: str

    @classmethod
    def parse(cls, keyword: str | None) -> SearchQuery:
        if not keyword:
            raise MissingParameterError("wd")
        return cls(keyword=keyword)


def tag_item(item: Any, source: Source) -> dict[str, Any]:
    """Stamp one upstream result with the source it came from.

    Mappings keep every field they carry; anything else is reduced to
    the tags alone so that a garbled entry is still forwarded.
    """
    base = dict(item) if isinstance(item, Mapping) else {}
    base["site_key"] = source.key
    base["site_name"] = source.name
    return base


@dataclass(frozen=True)
class SearchChunk:
    """One source's normalized result batch."""

    source_key: str
    items: list[dict[str, Any]] = field(default_factory=list)

    event_type = SearchEventType.CHUNK

    @classmethod
    def from_upstream(cls, source: Source, raw_items: list[Any]) -> SearchChunk:
        return cls(
            source_key=source.key,
            items=[tag_item(item, source) for item in raw_items],
        )

    def __len__(self) -> int:
        return len(self.items)

    def to_payload(self) -> list[dict[str, Any]]:
        return self.items


@dataclass(frozen=True)
class SearchDone:
    """Terminal marker emitted once every worker has settled."""

    sources_total: int = 0
    sources_succeeded: int = 0

    event_type = SearchEventType.DONE

    def to_payload(self) -> dict[str, Any]:
        return {}


SearchEvent = SearchChunk | SearchDone
