"""URL helpers shared by the HTML, CSS and asset passes."""

from __future__ import annotations

import posixpath
import re
from urllib.parse import urlsplit

FRAGMENT_PROTOCOL = "url_fragment"
HTTP_PROTOCOLS = frozenset({"http:", "https:"})

# Permissive token pattern for URLs embedded in free text such as srcset
# lists or CSS declaration values.
URL_PATTERN = re.compile(
    r"(?:(?:https?|ftp|file)://|www\.|ftp\.)"
    r"(?:\([-A-Z0-9+&@#/%=~_|$?!:,.]*\)|[-A-Z0-9+&@#/%=~_|$?!:,.])*"
    r"(?:\([-A-Z0-9+&@#/%=~_|$?!:,.]*\)|[A-Z0-9+&@#/%=~_|$])",
    re.IGNORECASE,
)
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")

# Schemes that cannot be valid without an authority component.
HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def extract_urls(text: str | None) -> list[str]:
    """Return every URL token found in ``text`` in order of appearance."""

    if not text:
        return []
    return [match.group(0) for match in URL_PATTERN.finditer(text)]


def is_valid_url(value: str | None) -> bool:
    """Return True when ``value`` parses as an absolute URL."""

    if not value:
        return False
    candidate = value.strip()
    if not SCHEME_PATTERN.match(candidate):
        return False
    try:
        parts = urlsplit(candidate)
        # Accessing the port validates bracketed hosts and numeric ports.
        parts.port
    except ValueError:
        return False
    if parts.scheme in HOST_SCHEMES and not is_valid_host(parts.hostname):
        return False
    return True


def is_valid_host(hostname: str | None) -> bool:
    """Return True for a host name that can be IDNA-encoded for a lookup."""

    if not hostname or any(char.isspace() for char in hostname):
        return False
    try:
        hostname.encode("idna")
    except UnicodeError:
        return False
    return True


def is_fragment(value: str | None) -> bool:
    return bool(value) and value.strip().startswith("#")


def url_protocol(value: str) -> str:
    """Return ``scheme:`` for an absolute URL or the fragment marker."""

    candidate = value.strip()
    if candidate.startswith("#"):
        return FRAGMENT_PROTOCOL
    return f"{urlsplit(candidate).scheme.lower()}:"


def url_format(value: str) -> str | None:
    """Return the file extension of the URL path, e.g. ``.png``."""

    candidate = value.strip()
    if "?" in candidate:
        candidate = candidate[: candidate.index("?")]
    if "#" in candidate:
        candidate = candidate[: candidate.index("#")]
    path = urlsplit(candidate).path if SCHEME_PATTERN.match(candidate) else candidate
    _, ext = posixpath.splitext(path)
    return ext or None


__all__ = [
    "FRAGMENT_PROTOCOL",
    "HTTP_PROTOCOLS",
    "extract_urls",
    "is_fragment",
    "is_valid_host",
    "is_valid_url",
    "url_format",
    "url_protocol",
]
