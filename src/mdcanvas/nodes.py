"""Syntax tree node types consumed by the renderer.

Node kinds use the mdast spelling (``inlineCode``, ``listItem``,
``thematicBreak`` ...). Nodes are frozen; the renderer never mutates them.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Node:
    """Base class for all syntax tree nodes."""

    KIND: ClassVar[str] = ""

    @property
    def kind(self) -> str:
        return self.KIND

    @property
    def children(self) -> tuple[Node, ...]:
        return ()

    def walk(self) -> Iterator[Node]:
        """Yield this node and its descendants in document order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(frozen=True)
class Root(Node):
    KIND: ClassVar[str] = "root"

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Paragraph(Node):
    KIND: ClassVar[str] = "paragraph"

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Heading(Node):
    """Section heading; ``depth`` runs from 1 (largest) to 6."""

    KIND: ClassVar[str] = "heading"

    depth: int = 1
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Text(Node):
    KIND: ClassVar[str] = "text"

    value: str = ""


@dataclass(frozen=True)
class Strong(Node):
    KIND: ClassVar[str] = "strong"

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Emphasis(Node):
    KIND: ClassVar[str] = "emphasis"

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Delete(Node):
    """Strike-through span."""

    KIND: ClassVar[str] = "delete"

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Break(Node):
    """Hard line break inside a paragraph."""

    KIND: ClassVar[str] = "break"


@dataclass(frozen=True)
class InlineCode(Node):
    KIND: ClassVar[str] = "inlineCode"

    value: str = ""


@dataclass(frozen=True)
class Code(Node):
    """Fenced or indented code block."""

    KIND: ClassVar[str] = "code"

    value: str = ""
    lang: str | None = None


@dataclass(frozen=True)
class Link(Node):
    KIND: ClassVar[str] = "link"

    url: str = ""
    title: str | None = None
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class ListItem(Node):
    KIND: ClassVar[str] = "listItem"

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class List(Node):
    """Ordered or unordered list; ``start`` applies to ordered lists only."""

    KIND: ClassVar[str] = "list"

    ordered: bool = False
    start: int | None = None
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Blockquote(Node):
    KIND: ClassVar[str] = "blockquote"

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class ThematicBreak(Node):
    KIND: ClassVar[str] = "thematicBreak"


@dataclass(frozen=True)
class UnknownNode(Node):
    """Any node kind outside the supported set (tables, images, html ...)."""

    name: str = ""
    children: tuple[Node, ...] = ()

    @property
    def kind(self) -> str:
        return self.name


SUPPORTED_KINDS = (
    Paragraph.KIND,
    Heading.KIND,
    Text.KIND,
    Strong.KIND,
    Emphasis.KIND,
    Delete.KIND,
    Break.KIND,
    InlineCode.KIND,
    Code.KIND,
    Link.KIND,
    List.KIND,
    ListItem.KIND,
    Blockquote.KIND,
    ThematicBreak.KIND,
)
