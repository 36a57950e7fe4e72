"""Core immutable data structures used throughout emlanalyzer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CssRule:
    """A single property/value declaration."""

    property: str
    value: str


@dataclass(frozen=True)
class CssAtRule:
    """An at-rule header such as ``@media screen``."""

    name: str
    params: str


@dataclass(frozen=True)
class MimeTypes:
    """Which body alternatives the message carries."""

    text: bool
    html: bool
    amp: bool


@dataclass(frozen=True)
class SubjectMetrics:
    """Length metrics of the subject line."""

    chars: int = 0
    words: int = 0
    emojis: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SenderInfo:
    """Public suffix facts about the sender domain."""

    tld: str = ""
    subdomain: str = ""
    government: bool = False
    education: bool = False


@dataclass(frozen=True)
class LanguageInfo:
    code: str
    name: str


@dataclass(frozen=True)
class HtmlReport:
    """Structural HTML features."""

    url_protocols: list[str]
    tags: Mapping[str, int]
    attributes: list[str]
    conditional_comments: list[str]
    has_structured_data: bool
    has_microsoft_actionable_message: bool


@dataclass(frozen=True)
class CssReport:
    """Stylesheet inventory."""

    has_invalid: bool
    properties: list[str]
    values: list[str]
    selectors: list[str]
    rules: list[CssRule]
    at_rules: list[CssAtRule]


@dataclass(frozen=True)
class AssetReport:
    """Referenced images and stylesheets.

    ``sizes`` is not deduplicated and may hold fewer entries than
    ``formats`` when size resolution failed or was disabled.
    """

    image_count: int
    formats: list[str]
    sizes: list[int]


@dataclass(frozen=True)
class Report:
    """Complete feature report for one message."""

    mime_types: MimeTypes
    subject: SubjectMetrics
    sender: SenderInfo
    has_attachments: bool
    language: LanguageInfo
    html: HtmlReport
    css: CssReport
    external_assets: AssetReport

    def as_dict(self) -> dict[str, Any]:
        """Return the report using the field names downstream consumers expect."""

        return {
            "mimeTypes": {
                "text": self.mime_types.text,
                "html": self.mime_types.html,
                "amp": self.mime_types.amp,
            },
            "subject": {
                "chars": self.subject.chars,
                "words": self.subject.words,
                "emojis": list(self.subject.emojis),
            },
            "sender": {
                "tld": self.sender.tld,
                "subdomain": self.sender.subdomain,
                "government": self.sender.government,
                "education": self.sender.education,
            },
            "hasAttachments": self.has_attachments,
            "language": {"code": self.language.code, "name": self.language.name},
            "html": {
                "urlProtocols": list(self.html.url_protocols),
                "tags": {name: {"count": count} for name, count in self.html.tags.items()},
                "attributes": list(self.html.attributes),
                "conditionalComments": list(self.html.conditional_comments),
                "hasStructuredData": self.html.has_structured_data,
                "hasMicrosoftActionableMessage": self.html.has_microsoft_actionable_message,
            },
            "css": {
                "hasInvalid": self.css.has_invalid,
                "properties": list(self.css.properties),
                "values": list(self.css.values),
                "selectors": list(self.css.selectors),
                "rules": [{"property": r.property, "value": r.value} for r in self.css.rules],
                "atRules": [{"name": r.name, "params": r.params} for r in self.css.at_rules],
            },
            "externalAssets": {
                "imageCount": self.external_assets.image_count,
                "formats": list(self.external_assets.formats),
                "sizes": list(self.external_assets.sizes),
            },
        }


__all__ = [
    "AssetReport",
    "CssAtRule",
    "CssReport",
    "CssRule",
    "HtmlReport",
    "LanguageInfo",
    "MimeTypes",
    "Report",
    "SenderInfo",
    "SubjectMetrics",
]
