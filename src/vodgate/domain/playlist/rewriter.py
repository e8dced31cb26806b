"""HLS playlist rewriting.

A playlist references its segments, keys and alternate renditions by
absolute or relative URIs. Those requests would bypass the gateway, so
every reference is resolved against the playlist's own URL and replaced
by a URL that points back at the proxy endpoint.

Two kinds of reference are rewritten:

- URI lines: any non-blank line that does not start with ``#``.
- ``URI="..."`` attributes inside tag lines (``#EXT-X-KEY``,
  ``#EXT-X-MEDIA``, ``#EXT-X-MAP`` ...). Quoting and the rest of the tag
  are preserved.

Everything else, including ``#EXTINF`` and other comments, is left
untouched. Line endings are preserved as found.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from vodgate.domain.shared.urls import encode_uri_component, resolve_reference

PLAYLIST_MEDIA_TYPE = "application/vnd.apple.mpegurl"
PLAYLIST_EXTENSION = ".m3u8"

_URI_ATTRIBUTE = re.compile(r'URI="([^"]+)"')
_LINE_BREAK = re.compile(r"(\r\n|\r|\n)")


def is_playlist(url: str, content_type: str | None) -> bool:
    """Decide whether a proxied payload should be treated as a playlist."""
    if urlsplit(url).path.lower().endswith(PLAYLIST_EXTENSION):
        return True
    return "mpegurl" in (content_type or "").lower()


class PlaylistRewriter:
    """Rewrites playlist references into proxied absolute URLs."""

    def __init__(self, proxy_base: str):
        # e.g. "https://gateway.example/api/cors?url="
        self._proxy_base = proxy_base

    @property
    def proxy_base(self) -> str:
        return self._proxy_base

    def proxied(self, reference: str, target_url: str) -> str:
        resolved = resolve_reference(reference.strip(), target_url)
        return f"{self._proxy_base}{encode_uri_component(resolved)}"

    def rewrite(self, text: str, target_url: str) -> str:
        parts = _LINE_BREAK.split(text)
        # split() with a capturing group alternates content and separators
        for i in range(0, len(parts), 2):
            parts[i] = self._rewrite_line(parts[i], target_url)
        return "".join(parts)

    def _rewrite_line(self, line: str, target_url: str) -> str:
        stripped = line.strip()
        if not stripped:
            return line
        if not stripped.startswith("#"):
            return self.proxied(stripped, target_url)
        return _URI_ATTRIBUTE.sub(
            lambda m: f'URI="{self.proxied(m.group(1), target_url)}"',
            line,
        )
