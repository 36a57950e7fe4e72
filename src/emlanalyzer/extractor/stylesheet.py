"""Stylesheet AST built on tinycss2.

tinycss2 recovers from malformed input by emitting ``ParseError`` nodes in
place of the broken construct. Any such node, at any depth, makes the whole
input invalid here so callers see a single :class:`CssParseError`.

Blocks left open at the end of the input are closed silently by tinycss2;
they are rejected here as well, as are unterminated comments.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

import tinycss2
from tinycss2 import ast


class CssParseError(ValueError):
    """Raised when a stylesheet or declaration list is malformed."""

    def __init__(self, error: ast.ParseError) -> None:
        super().__init__(f"{error.message} (line {error.source_line}, column {error.source_column})")
        self.kind = error.kind


@dataclass(frozen=True)
class DeclarationNode:
    property: str
    value: str
    important: bool = False


@dataclass(frozen=True)
class RuleNode:
    """A qualified rule: selector plus its block contents."""

    selector: str
    children: list[Node] = field(default_factory=list)


@dataclass(frozen=True)
class AtRuleNode:
    """An at-rule; ``children`` is empty for statement at-rules like @import."""

    name: str
    params: str
    children: list[Node] = field(default_factory=list)


Node = Union[RuleNode, AtRuleNode, DeclarationNode]


def parse_stylesheet(text: str) -> list[Node]:
    """Parse the contents of a ``<style>`` element."""

    _check_closed(text)
    raw = tinycss2.parse_stylesheet(text, skip_comments=True, skip_whitespace=True)
    return _convert(raw)


def parse_declarations(text: str) -> list[DeclarationNode]:
    """Parse an inline ``style`` attribute value."""

    _check_closed(text)
    raw = tinycss2.parse_blocks_contents(text, skip_comments=True, skip_whitespace=True)
    return [node for node in _convert(raw) if isinstance(node, DeclarationNode)]


def _check_closed(text: str) -> None:
    """Raise when a block or comment in ``text`` is never closed.

    A trailing ``}`` is appended before tokenizing. When every block is
    closed it ends up as an unmatched top-level token; otherwise it closes
    the innermost open block (or is swallowed by an open comment).
    """

    tokens = tinycss2.parse_component_value_list(f"{text}\n}}", skip_comments=True)
    last = tokens[-1] if tokens else None
    if isinstance(last, ast.ParseError) and last.kind == "}":
        return
    line = getattr(last, "source_line", 1)
    column = getattr(last, "source_column", 1)
    raise CssParseError(ast.ParseError(line, column, "unclosed", "Unclosed block"))


def _convert(raw_nodes: Iterable[ast.Node]) -> list[Node]:
    nodes: list[Node] = []
    for raw in raw_nodes:
        if isinstance(raw, ast.ParseError):
            raise CssParseError(raw)
        if isinstance(raw, ast.QualifiedRule):
            _check_tokens(raw.prelude)
            nodes.append(
                RuleNode(
                    selector=tinycss2.serialize(raw.prelude).strip(),
                    children=_convert_block(raw.content),
                )
            )
        elif isinstance(raw, ast.AtRule):
            _check_tokens(raw.prelude)
            nodes.append(
                AtRuleNode(
                    name=raw.at_keyword,
                    params=tinycss2.serialize(raw.prelude).strip(),
                    children=_convert_block(raw.content),
                )
            )
        elif isinstance(raw, ast.Declaration):
            _check_tokens(raw.value)
            nodes.append(
                DeclarationNode(
                    property=raw.name,
                    value=tinycss2.serialize(raw.value).strip(),
                    important=raw.important,
                )
            )
    return nodes


def _convert_block(content: list[ast.Node] | None) -> list[Node]:
    if content is None:
        return []
    raw = tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True)
    return _convert(raw)


def _check_tokens(tokens: Iterable[ast.Node] | None) -> None:
    for token in tokens or ():
        if isinstance(token, ast.ParseError):
            raise CssParseError(token)
        if isinstance(token, (ast.ParenthesesBlock, ast.SquareBracketsBlock, ast.CurlyBracketsBlock)):
            _check_tokens(token.content)
        elif isinstance(token, ast.FunctionBlock):
            _check_tokens(token.arguments)


__all__ = [
    "AtRuleNode",
    "CssParseError",
    "DeclarationNode",
    "Node",
    "RuleNode",
    "parse_declarations",
    "parse_stylesheet",
]
