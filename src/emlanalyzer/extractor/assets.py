"""Discovery, classification and size resolution of referenced assets."""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from collections.abc import Sequence

import aiohttp

from ..accumulator import FeatureAccumulator
from ..message import Attachment
from ..probe import AssetProbeError, Probe
from .urls import HTTP_PROTOCOLS, is_valid_url, url_format, url_protocol

LOGGER = logging.getLogger(__name__)

CID_SCHEME = "cid:"
# UnicodeError (a ValueError) is raised when a host fails IDNA encoding.
PROBE_ERRORS = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    AssetProbeError,
    ValueError,
    OSError,
)


class AssetResolver:
    """Turns raw asset references into formats, protocols and byte sizes.

    Every reference is resolved on its own; a skipped or failing reference
    never stops the remaining ones. Sizes are only recorded on success, so
    ``asset_sizes`` may end up shorter than ``asset_formats``.
    """

    def __init__(
        self,
        accumulator: FeatureAccumulator,
        attachments: Sequence[Attachment],
        probe: Probe | None = None,
    ) -> None:
        self._acc = accumulator
        self._attachments = list(attachments)
        self._probe = probe

    def discover(self, reference: str) -> None:
        """Record an image-like reference (``src``, ``srcset``, CSS ``url()``)."""

        self._acc.add_reference(reference)

    def discover_stylesheet(self, href: str) -> None:
        self._acc.add_stylesheet(href)

    async def resolve(self) -> None:
        """Resolve each distinct reference, then every stylesheet link, in order."""

        for reference in self._acc.distinct_references():
            if reference[: len(CID_SCHEME)].lower() == CID_SCHEME:
                self._resolve_inline(reference[len(CID_SCHEME) :])
                continue
            if not is_valid_url(reference):
                LOGGER.debug("Skipping invalid asset reference %r", reference)
                continue
            protocol = url_protocol(reference)
            self._acc.add_protocol(protocol)
            await self._resolve_remote(reference, protocol)

        for href in self._acc.stylesheets:
            await self._resolve_remote(href, url_protocol(href))

    def _resolve_inline(self, content_id: str) -> None:
        attachment = find_attachment(self._attachments, content_id)
        if attachment is None:
            LOGGER.debug("No attachment matches cid:%s", content_id)
            return
        if attachment.content_type:
            self._acc.add_format(attachment_format(attachment.content_type))
        size = disposition_size(attachment.content_disposition)
        if size is not None:
            self._acc.add_size(size)

    async def _resolve_remote(self, url: str, protocol: str) -> None:
        fmt = url_format(url)
        if fmt:
            self._acc.add_format(fmt)
        if self._probe is None or protocol not in HTTP_PROTOCOLS:
            return
        try:
            size = await self._probe.probe(url)
        except PROBE_ERRORS as exc:
            LOGGER.warning("Couldn't get file size of %s: %s", url, str(exc) or type(exc).__name__)
            return
        self._acc.add_size(size)


def find_attachment(attachments: Sequence[Attachment], content_id: str) -> Attachment | None:
    """Return the attachment whose ``Content-Id`` header names ``content_id``."""

    wanted = content_id.strip()
    for attachment in attachments:
        header = (attachment.content_id or "").strip()
        if header in (f"<{wanted}>", wanted):
            return attachment
    return None


def attachment_format(content_type: str) -> str:
    """Map a MIME type to an extension-like format (``image/png`` -> ``.png``)."""

    maintype, _, subtype = content_type.lower().partition("/")
    if maintype == "image" and subtype:
        return f".{subtype}"
    return mimetypes.guess_extension(content_type) or content_type


def disposition_size(header: str | None) -> int | None:
    """Return the ``size=`` parameter of a Content-Disposition header."""

    if not header:
        return None
    for param in header.split(";"):
        name, sep, value = param.strip().partition("=")
        if not sep or name.strip().lower() != "size":
            continue
        try:
            return int(value.strip().strip('"'))
        except ValueError:
            LOGGER.debug("Ignoring non-numeric size parameter %r", value)
            return None
    return None


__all__ = ["AssetResolver", "attachment_format", "disposition_size", "find_attachment"]
