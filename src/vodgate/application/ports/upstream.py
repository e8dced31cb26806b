"""Upstream HTTP port for the application layer.

This abstracts outbound HTTP so that the search engine and the proxy
stay independent of the concrete client library.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UpstreamText:
    """A fully-read upstream response body."""

    status_code: int
    text: str
    content_type: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class UpstreamStream(ABC):
    """An upstream response whose body has not been read yet."""

    @property
    @abstractmethod
    def status_code(self) -> int:
        """HTTP status reported by the upstream."""

    @property
    @abstractmethod
    def content_type(self) -> str:
        """Declared Content-Type, empty string when absent."""

    @abstractmethod
    def aiter_bytes(self) -> AsyncIterator[bytes]:
        """Iterate over the raw body as it arrives."""

    @abstractmethod
    async def aread(self) -> bytes:
        """Buffer the whole body."""

    @abstractmethod
    async def aclose(self) -> None:
        """Release the underlying connection."""


class UpstreamPort(ABC):
    """Abstract interface for outbound HTTP calls."""

    @abstractmethod
    async def get_json(
        self,
        url: str,
        *,
        timeout: float | None = None,
    ) -> Any:
        """GET a URL and decode its body as JSON.

        The HTTP status is not inspected. Network failures, timeouts and
        undecodable bodies raise UpstreamError.
        """

    @abstractmethod
    async def get_text(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> UpstreamText:
        """GET a URL and return its body as text."""

    @abstractmethod
    async def open_stream(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> UpstreamStream:
        """GET a URL and return the response before reading its body.

        The caller owns the returned stream and must close it.
        """
