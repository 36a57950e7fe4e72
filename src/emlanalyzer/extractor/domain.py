"""Sender domain classification."""

from __future__ import annotations

import ipaddress
import re
from email.utils import parseaddr

import tldextract

from ..types import SenderInfo

HOST_RE = re.compile(r"^[A-Za-z0-9.-]+$")
GOVERNMENT_RE = re.compile(r"\bgov\b", re.IGNORECASE)
EDUCATION_RE = re.compile(r"\bedu\b", re.IGNORECASE)

# Bundled public suffix snapshot only; never fetch the list at runtime.
_EXTRACT = tldextract.TLDExtract(suffix_list_urls=())


def sender_domain(address: str) -> str | None:
    """Return the normalized host part of a From address."""

    _, email_addr = parseaddr(address or "")
    if not email_addr and address:
        if "<" in address and ">" in address:
            email_addr = address.split("<", 1)[1].split(">", 1)[0].strip()
        else:
            email_addr = address.strip()
    if not email_addr or "@" not in email_addr:
        return None
    return _normalize_host(email_addr.rsplit("@", 1)[1])


def classify_sender(address: str) -> SenderInfo:
    """Split the sender domain into suffix and subdomain and flag gov/edu senders."""

    domain = sender_domain(address)
    if domain is None:
        return SenderInfo()
    extracted = _EXTRACT(f"https://{domain}")
    tld = extracted.suffix
    return SenderInfo(
        tld=tld,
        subdomain=extracted.subdomain,
        government=bool(GOVERNMENT_RE.search(tld)),
        education=bool(EDUCATION_RE.search(tld)),
    )


def _normalize_host(host: str | None) -> str | None:
    if not host:
        return None
    candidate = host.strip().lower().rstrip(".")
    if candidate.startswith("[") and candidate.endswith("]"):
        candidate = candidate[1:-1]
    if not candidate:
        return None

    # IPv4/IPv6 literals retain their exact string.
    try:
        ipaddress.ip_address(candidate)
        return candidate
    except ValueError:
        pass

    if not HOST_RE.match(candidate):
        return None
    return ".".join(label for label in candidate.split(".") if label) or None


__all__ = ["classify_sender", "sender_domain"]
