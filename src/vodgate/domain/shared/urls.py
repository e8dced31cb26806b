"""URL helpers shared by the search and proxy paths."""

from urllib.parse import quote, urljoin

# Characters left unescaped by ECMAScript encodeURIComponent, besides
# the alphanumerics and "_.-~" that quote() never escapes.
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode a query component exactly like encodeURIComponent."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def resolve_reference(reference: str, base_url: str) -> str:
    """Resolve an absolute or relative reference against a base URL."""
    return urljoin(base_url, reference)
