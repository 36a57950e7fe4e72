"""Remote asset size probing over HTTP."""

from __future__ import annotations

import logging
from typing import Protocol

import aiohttp

from .config import DEFAULT_PROBE_TIMEOUT

LOGGER = logging.getLogger(__name__)
USER_AGENT = "emlanalyzer/asset-probe"


class AssetProbeError(RuntimeError):
    """Raised when a remote asset does not report its size."""


class Probe(Protocol):
    async def probe(self, url: str) -> int: ...


class SizeProbe:
    """
    Resolves the byte size of a remote resource with a HEAD request.
    Owns one aiohttp session for its lifetime; use as an async context manager.
    """

    def __init__(self, timeout: float = DEFAULT_PROBE_TIMEOUT) -> None:
        self.timeout = timeout
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> SizeProbe:
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def initialize(self) -> None:
        if not self.session or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"User-Agent": USER_AGENT},
            )
            LOGGER.debug("SizeProbe: session initialized.")

    async def close(self) -> None:
        if self.session and not self.session.closed:
            await self.session.close()
            LOGGER.debug("SizeProbe: session closed.")

    async def probe(self, url: str) -> int:
        """Return the ``Content-Length`` of ``url`` without fetching its body."""

        if not self.session or self.session.closed:
            await self.initialize()
        assert self.session is not None

        async with self.session.head(url, allow_redirects=True) as response:
            response.raise_for_status()
            return content_length(response.headers.get("Content-Length"), url)


def content_length(value: str | None, url: str) -> int:
    """Parse a ``Content-Length`` header value."""

    if value is None:
        raise AssetProbeError(f"No Content-Length for {url}")
    try:
        length = int(value)
    except ValueError as exc:
        raise AssetProbeError(f"Invalid Content-Length {value!r} for {url}") from exc
    if length < 0:
        raise AssetProbeError(f"Invalid Content-Length {value!r} for {url}")
    return length


__all__ = ["AssetProbeError", "Probe", "SizeProbe", "content_length"]
