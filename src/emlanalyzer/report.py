"""Projection of collected facts into the final report."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import TypeVar

from .accumulator import FeatureAccumulator
from .extractor.domain import classify_sender
from .extractor.text import subject_metrics
from .message import Message
from .types import (
    AssetReport,
    CssReport,
    HtmlReport,
    LanguageInfo,
    MimeTypes,
    Report,
)

T = TypeVar("T")


def unique(items: Iterable[T]) -> list[T]:
    """Drop duplicates by equality, keeping first-seen order."""

    return list(dict.fromkeys(items))


def mime_types(message: Message) -> MimeTypes:
    return MimeTypes(
        text=bool(message.text),
        html=bool(message.html),
        amp=bool(message.amp),
    )


def html_report(acc: FeatureAccumulator) -> HtmlReport:
    return HtmlReport(
        url_protocols=unique(acc.url_protocols),
        tags=dict(Counter(acc.tag_names)),
        attributes=unique(acc.attributes),
        conditional_comments=unique(acc.conditional_comments),
        has_structured_data=acc.has_structured_data,
        has_microsoft_actionable_message=acc.has_actionable_message,
    )


def css_report(acc: FeatureAccumulator) -> CssReport:
    return CssReport(
        has_invalid=acc.has_invalid_css,
        properties=unique(acc.css_properties),
        values=unique(acc.css_values),
        selectors=unique(acc.css_selectors),
        rules=unique(acc.css_rules),
        at_rules=unique(acc.css_at_rules),
    )


def asset_report(acc: FeatureAccumulator) -> AssetReport:
    return AssetReport(
        image_count=len(acc.distinct_references()),
        formats=unique(acc.asset_formats),
        sizes=list(acc.asset_sizes),
    )


def build_report(message: Message, acc: FeatureAccumulator, language: LanguageInfo) -> Report:
    """Assemble the report; performs no I/O."""

    return Report(
        mime_types=mime_types(message),
        subject=subject_metrics(message.subject),
        sender=classify_sender(message.from_address),
        has_attachments=bool(message.attachments),
        language=language,
        html=html_report(acc),
        css=css_report(acc),
        external_assets=asset_report(acc),
    )


__all__ = ["asset_report", "build_report", "css_report", "html_report", "mime_types", "unique"]
