"""Helpers for analysing HTML email parts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..accumulator import FeatureAccumulator
from .css import CssCollector
from .document import Document, Element
from .urls import extract_urls, is_fragment, is_valid_url, url_protocol

if TYPE_CHECKING:
    from .assets import AssetResolver

STRUCTURED_DATA_TYPE = "application/ld+json"
ACTIONABLE_MESSAGE_TYPE = "application/adaptivecard+json"
CONDITIONAL_COMMENT_PREFIX = "[if"


class HtmlCollector:
    """Walks a document once and records its structural facts."""

    def __init__(
        self,
        accumulator: FeatureAccumulator,
        css: CssCollector,
        assets: AssetResolver,
    ) -> None:
        self._acc = accumulator
        self._css = css
        self._assets = assets

    def collect(self, document: Document) -> None:
        """Visit every element, then comments, then the ``<style>`` blocks."""

        style_blocks: list[str] = []
        for element in document.elements():
            self._visit(element)
            if element.name == "style":
                style_blocks.append(element.text)

        for comment in document.comments():
            marker = conditional_comment_marker(comment)
            if marker is not None:
                self._acc.add_conditional_comment(marker)

        if style_blocks:
            self._css.collect_stylesheet("".join(style_blocks))

    def _visit(self, element: Element) -> None:
        self._acc.add_tag(element.name)
        for name in element.attributes:
            self._acc.add_attribute(name)
        self._record_href(element)
        self._record_structured_data(element)
        self._record_images(element)
        self._record_stylesheet_link(element)
        if element.has("style"):
            self._css.collect_inline(element.get("style") or "")

    def _record_href(self, element: Element) -> None:
        href = element.get("href")
        if href and (is_fragment(href) or is_valid_url(href)):
            self._acc.add_protocol(url_protocol(href))

    def _record_structured_data(self, element: Element) -> None:
        if element.name == "script":
            script_type = (element.get("type") or "").strip().lower()
            if script_type == STRUCTURED_DATA_TYPE and "schema.org" in element.text:
                self._acc.mark_structured_data()
            if script_type == ACTIONABLE_MESSAGE_TYPE and "AdaptiveCard" in element.text:
                self._acc.mark_actionable_message()

        itemtype = element.get("itemtype")
        if itemtype and "schema.org" in itemtype:
            self._acc.mark_structured_data()

    def _record_images(self, element: Element) -> None:
        src = element.get("src")
        if src and src.strip():
            self._assets.discover(src.strip())
        for url in extract_urls(element.get("srcset")):
            self._assets.discover(url)

    def _record_stylesheet_link(self, element: Element) -> None:
        if element.name != "link":
            return
        rel = (element.get("rel") or "").lower().split()
        href = element.get("href")
        if "stylesheet" in rel and href and is_valid_url(href):
            self._assets.discover_stylesheet(href.strip())


def conditional_comment_marker(comment: str) -> str | None:
    """Return ``[if ...]>`` for a conditional comment, None for other comments."""

    if not comment.startswith(CONDITIONAL_COMMENT_PREFIX):
        return None
    end = comment.find(">")
    if end == -1:
        return comment
    return comment[: end + 1]


__all__ = ["HtmlCollector", "conditional_comment_marker"]
