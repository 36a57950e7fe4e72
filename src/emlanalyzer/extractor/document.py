"""Read-only views over a BeautifulSoup document tree."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from bs4 import BeautifulSoup, Comment, NavigableString, Tag


@dataclass(frozen=True)
class Element:
    """An element with its attributes resolved into a name/value map."""

    name: str
    attributes: Mapping[str, str]
    text: str

    def get(self, attribute: str) -> str | None:
        """Return an attribute value, or None when the attribute is absent."""

        return self.attributes.get(attribute)

    def has(self, attribute: str) -> bool:
        return attribute in self.attributes

    @classmethod
    def from_tag(cls, tag: Tag) -> Element:
        attributes = {name: _attribute_text(value) for name, value in tag.attrs.items()}
        text = "".join(
            str(child)
            for child in tag.children
            if isinstance(child, NavigableString) and not isinstance(child, Comment)
        )
        return cls(name=tag.name, attributes=attributes, text=text)


class Document:
    """Parsed HTML body of a message."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def parse(cls, html: str | None) -> Document:
        """Parse an HTML body.

        Character entities are always decoded by BeautifulSoup, so attribute
        values (``href``, ``style``) and text come back decoded: ``&amp;``
        is reported as ``&``. There is no mode that keeps them literal.
        """

        # html.parser keeps fragments as-is instead of wrapping them in
        # <html>/<body>; multi-valued attributes stay plain strings.
        soup = BeautifulSoup(html or "", "html.parser", multi_valued_attributes=None)
        return cls(soup)

    def elements(self) -> Iterator[Element]:
        """Yield every element depth-first in document order."""

        for tag in self._soup.find_all(True):
            yield Element.from_tag(tag)

    def comments(self) -> Iterator[str]:
        """Yield the text of every comment node in document order."""

        for node in self._soup.descendants:
            if isinstance(node, Comment):
                yield str(node)


def _attribute_text(value: object) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


__all__ = ["Document", "Element"]
