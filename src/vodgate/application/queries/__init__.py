"""Application queries."""

from vodgate.application.queries.resolve_sources_query import (
    DEFAULT_SITES,
    ResolveSourcesQuery,
    SourceOrigin,
    SourceRegistry,
    decode_inline_catalogue,
    parse_catalogue,
)
from vodgate.application.queries.source_detail_query import SourceDetailQuery

__all__ = [
    "DEFAULT_SITES",
    "ResolveSourcesQuery",
    "SourceDetailQuery",
    "SourceOrigin",
    "SourceRegistry",
    "decode_inline_catalogue",
    "parse_catalogue",
]
