"""Stylesheet and inline-style feature collection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..accumulator import FeatureAccumulator
from .stylesheet import (
    AtRuleNode,
    CssParseError,
    DeclarationNode,
    Node,
    RuleNode,
    parse_declarations,
    parse_stylesheet,
)
from .urls import extract_urls

if TYPE_CHECKING:
    from .assets import AssetResolver

LOGGER = logging.getLogger(__name__)


class CssCollector:
    """Feeds selectors, at-rules and declarations into the accumulator."""

    def __init__(self, accumulator: FeatureAccumulator, assets: AssetResolver) -> None:
        self._acc = accumulator
        self._assets = assets

    def collect_stylesheet(self, text: str) -> None:
        """Collect from the combined text of the document's ``<style>`` elements."""

        try:
            nodes = parse_stylesheet(text)
        except CssParseError as exc:
            LOGGER.warning("Couldn't parse CSS in <style>: %s", exc)
            self._acc.mark_invalid_css()
            return
        self.walk(nodes)

    def collect_inline(self, text: str) -> None:
        """Collect from a single ``style`` attribute value."""

        try:
            declarations = parse_declarations(text)
        except CssParseError as exc:
            LOGGER.warning("Couldn't parse inline CSS %r: %s", text, exc)
            self._acc.mark_invalid_css()
            return
        for declaration in declarations:
            self._record_declaration(declaration)

    def walk(self, nodes: Sequence[Node]) -> None:
        """Record every node, descending into rule and at-rule blocks."""

        for node in nodes:
            if isinstance(node, RuleNode):
                if node.selector:
                    self._acc.add_selector(node.selector)
                self.walk(node.children)
            elif isinstance(node, AtRuleNode):
                self._acc.add_at_rule(node.name, node.params)
                self.walk(node.children)
            elif isinstance(node, DeclarationNode):
                self._record_declaration(node)

    def _record_declaration(self, declaration: DeclarationNode) -> None:
        self._acc.add_declaration(declaration.property, declaration.value)
        if "url(" in declaration.value.lower():
            for url in extract_urls(declaration.value):
                self._assets.discover(url)


__all__ = ["CssCollector"]
