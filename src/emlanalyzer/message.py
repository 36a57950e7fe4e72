"""Typed view over a parsed RFC822 message."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from email import policy
from email.header import decode_header, make_header
from email.message import Message as EmailMessage
from email.parser import BytesParser
from email.utils import parseaddr
from pathlib import Path

LOGGER = logging.getLogger(__name__)

BODY_TYPES = {
    "text/plain": "text",
    "text/html": "html",
    "text/x-amp-html": "amp",
}


class MessageParseError(ValueError):
    """Raised when an email source cannot be parsed."""


@dataclass(frozen=True)
class Attachment:
    """A non-body MIME part together with its headers."""

    content_type: str
    filename: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""

        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    @property
    def content_id(self) -> str | None:
        return self.header("Content-Id")

    @property
    def content_disposition(self) -> str | None:
        return self.header("Content-Disposition")


@dataclass(frozen=True)
class Message:
    """The parts of an email message the analyzer consumes."""

    subject: str | None
    from_address: str
    from_display_name: str = ""
    text: str | None = None
    html: str | None = None
    amp: str | None = None
    attachments: list[Attachment] = field(default_factory=list)


def read_message(path: Path) -> Message:
    """Read and parse an email file from disk."""

    try:
        source = path.read_bytes()
    except OSError as exc:
        LOGGER.error("Failed to read %s: %s", path, exc)
        raise MessageParseError("Couldn't parse .eml file") from exc
    return parse_message(source)


def parse_message(source: bytes | str) -> Message:
    """Parse raw email source into a :class:`Message`."""

    if isinstance(source, str):
        source = source.encode("utf-8", errors="surrogateescape")
    try:
        parsed = BytesParser(policy=policy.default).parsebytes(source)
    except Exception as exc:
        LOGGER.error("Email parser failed: %s", exc)
        raise MessageParseError("Couldn't parse .eml file") from exc
    if not tuple(parsed.keys()):
        raise MessageParseError("Couldn't parse .eml file")

    bodies: dict[str, str] = {}
    attachments: list[Attachment] = []
    for part in _iter_leaf_parts(parsed):
        content_type = part.get_content_type().lower()
        slot = BODY_TYPES.get(content_type)
        if slot and slot not in bodies and not _is_attachment(part):
            bodies[slot] = _decode_part(part)
            continue
        attachments.append(_attachment_from_part(part))

    subject = parsed.get("Subject")
    display_name, address = parseaddr(_decode_header_value(parsed.get("From", "")))
    return Message(
        subject=_decode_header_value(subject) if subject is not None else None,
        from_address=address,
        from_display_name=display_name,
        text=bodies.get("text"),
        html=bodies.get("html"),
        amp=bodies.get("amp"),
        attachments=attachments,
    )


def _iter_leaf_parts(message: EmailMessage) -> Iterable[EmailMessage]:
    for part in message.walk():
        if part.is_multipart():
            continue
        yield part


def _is_attachment(part: EmailMessage) -> bool:
    disposition = (part.get_content_disposition() or "").lower()
    return disposition == "attachment" or part.get_filename() is not None


def _attachment_from_part(part: EmailMessage) -> Attachment:
    headers = {key: str(value) for key, value in part.items()}
    return Attachment(
        content_type=part.get_content_type().lower(),
        filename=part.get_filename(),
        headers=headers,
    )


def _decode_part(part: EmailMessage) -> str:
    payload = part.get_payload(decode=True)
    if not isinstance(payload, (bytes, bytearray)):
        return ""
    return _decode_bytes(bytes(payload), part.get_content_charset())


def _decode_bytes(data: bytes, charset: str | None) -> str:
    candidates: Sequence[str] = []
    if charset:
        candidates = [charset]
    candidates = list(candidates) + ["utf-8", "latin-1"]
    for encoding in candidates:
        try:
            return data.decode(encoding, errors="replace")
        except LookupError:
            continue
    return data.decode("utf-8", errors="ignore")


def _decode_header_value(value: str) -> str:
    try:
        header = make_header(decode_header(value))
        decoded = str(header)
    except Exception:
        decoded = str(value)
    return decoded.strip()


__all__ = ["Attachment", "Message", "MessageParseError", "parse_message", "read_message"]
