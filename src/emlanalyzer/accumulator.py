"""Mutable fact store filled during a single analyzer run."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import CssAtRule, CssRule


@dataclass
class FeatureAccumulator:
    """Append-only collections written by the collectors.

    Only ``references`` is deduplicated before it is consumed (by the asset
    resolver); everything else keeps duplicates until report time.
    """

    tag_names: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    conditional_comments: list[str] = field(default_factory=list)
    url_protocols: list[str] = field(default_factory=list)
    css_properties: list[str] = field(default_factory=list)
    css_values: list[str] = field(default_factory=list)
    css_selectors: list[str] = field(default_factory=list)
    css_rules: list[CssRule] = field(default_factory=list)
    css_at_rules: list[CssAtRule] = field(default_factory=list)
    references: list[str] = field(default_factory=list)
    stylesheets: list[str] = field(default_factory=list)
    asset_formats: list[str] = field(default_factory=list)
    asset_sizes: list[int] = field(default_factory=list)
    has_structured_data: bool = False
    has_actionable_message: bool = False
    has_invalid_css: bool = False
    closed: bool = False

    def add_tag(self, name: str) -> None:
        self._ensure_open()
        self.tag_names.append(name)

    def add_attribute(self, name: str) -> None:
        self._ensure_open()
        self.attributes.append(name)

    def add_conditional_comment(self, marker: str) -> None:
        self._ensure_open()
        self.conditional_comments.append(marker)

    def add_protocol(self, protocol: str) -> None:
        self._ensure_open()
        self.url_protocols.append(protocol)

    def add_selector(self, selector: str) -> None:
        self._ensure_open()
        self.css_selectors.append(selector)

    def add_declaration(self, prop: str, value: str) -> None:
        """Record a declaration both flat and as a property/value pair."""

        self._ensure_open()
        self.css_properties.append(prop)
        self.css_values.append(value)
        self.css_rules.append(CssRule(property=prop, value=value))

    def add_at_rule(self, name: str, params: str) -> None:
        self._ensure_open()
        self.css_at_rules.append(CssAtRule(name=name, params=params))

    def add_reference(self, reference: str) -> None:
        self._ensure_open()
        self.references.append(reference)

    def add_stylesheet(self, href: str) -> None:
        self._ensure_open()
        self.stylesheets.append(href)

    def add_format(self, fmt: str) -> None:
        self._ensure_open()
        self.asset_formats.append(fmt)

    def add_size(self, size: int) -> None:
        self._ensure_open()
        self.asset_sizes.append(size)

    def mark_structured_data(self) -> None:
        self._ensure_open()
        self.has_structured_data = True

    def mark_actionable_message(self) -> None:
        self._ensure_open()
        self.has_actionable_message = True

    def mark_invalid_css(self) -> None:
        self._ensure_open()
        self.has_invalid_css = True

    def distinct_references(self) -> list[str]:
        """Return references with exact-string duplicates removed, first seen wins."""

        return list(dict.fromkeys(self.references))

    def close(self) -> None:
        """Seal the accumulator; later writes raise ``RuntimeError``."""

        self.closed = True

    def _ensure_open(self) -> None:
        if self.closed:
            raise RuntimeError("Feature accumulator is closed; start a new analyzer instead.")


__all__ = ["FeatureAccumulator"]
