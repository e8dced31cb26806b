"""Streaming playlist domain."""

from vodgate.domain.playlist.rewriter import (
    PLAYLIST_EXTENSION,
    PLAYLIST_MEDIA_TYPE,
    PlaylistRewriter,
    is_playlist,
)

__all__ = [
    "PLAYLIST_EXTENSION",
    "PLAYLIST_MEDIA_TYPE",
    "PlaylistRewriter",
    "is_playlist",
]
