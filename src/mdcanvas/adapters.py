"""Build syntax trees from mdast dictionaries and mistune 3 ASTs."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any

import mistune

from .nodes import (
    Blockquote,
    Break,
    Code,
    Delete,
    Emphasis,
    Heading,
    InlineCode,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Strong,
    Text,
    ThematicBreak,
    UnknownNode,
)

# ---------------------------------------------------------------------------
# mdast
# ---------------------------------------------------------------------------

_EXHAUSTED = object()

_MdastBuilder = Callable[[Mapping[str, Any], tuple[Node, ...]], Node]

_MDAST_BUILDERS: dict[str, _MdastBuilder] = {
    "root": lambda data, children: Root(children=children),
    "paragraph": lambda data, children: Paragraph(children=children),
    "heading": lambda data, children: Heading(depth=int(data.get("depth", 1)), children=children),
    "text": lambda data, children: Text(value=str(data.get("value", ""))),
    "strong": lambda data, children: Strong(children=children),
    "emphasis": lambda data, children: Emphasis(children=children),
    "delete": lambda data, children: Delete(children=children),
    "break": lambda data, children: Break(),
    "inlineCode": lambda data, children: InlineCode(value=str(data.get("value", ""))),
    "code": lambda data, children: Code(value=str(data.get("value", "")), lang=data.get("lang")),
    "link": lambda data, children: Link(
        url=str(data.get("url", "")), title=data.get("title"), children=children
    ),
    "list": lambda data, children: List(
        ordered=bool(data.get("ordered", False)),
        start=data.get("start"),
        children=children,
    ),
    "listItem": lambda data, children: ListItem(children=children),
    "blockquote": lambda data, children: Blockquote(children=children),
    "thematicBreak": lambda data, children: ThematicBreak(),
}


def from_mdast(data: Mapping[str, Any]) -> Node:
    """Convert an mdast-shaped mapping into syntax tree nodes.

    The tree is built with an explicit stack, so input depth is bounded by
    memory rather than the interpreter's recursion limit.
    """
    pending: list[tuple[Mapping[str, Any], Iterator[Any], list[Node]]] = [
        (data, iter(_mdast_children(data)), [])
    ]
    while True:
        current, remaining, built = pending[-1]
        child = next(remaining, _EXHAUSTED)
        if child is not _EXHAUSTED:
            pending.append((child, iter(_mdast_children(child)), []))
            continue
        pending.pop()
        node = _build_mdast_node(current, tuple(built))
        if not pending:
            return node
        pending[-1][2].append(node)


def _mdast_children(data: Any) -> Sequence[Any]:
    if not isinstance(data, Mapping):
        msg = "mdast node must be a mapping."
        raise ValueError(msg)
    node_type = data.get("type")
    if not isinstance(node_type, str) or not node_type:
        msg = "mdast node is missing a 'type' string."
        raise ValueError(msg)

    raw_children = data.get("children", ())
    if not isinstance(raw_children, Sequence) or isinstance(raw_children, str):
        msg = f"mdast node '{node_type}' has non-list children."
        raise ValueError(msg)
    return raw_children


def _build_mdast_node(data: Mapping[str, Any], children: tuple[Node, ...]) -> Node:
    node_type = data["type"]
    builder = _MDAST_BUILDERS.get(node_type)
    if builder is None:
        return UnknownNode(name=node_type, children=children)
    return builder(data, children)


def load_mdast(path: str | Path) -> Node:
    """Read an mdast tree from a JSON file."""
    source = Path(path)
    if not source.exists():
        msg = f"mdast file '{source}' does not exist."
        raise ValueError(msg)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"mdast file '{source}' is not valid JSON: {exc}."
        raise ValueError(msg) from exc
    return from_mdast(payload)


# ---------------------------------------------------------------------------
# mistune
# ---------------------------------------------------------------------------

_IGNORED_MISTUNE_TYPES = frozenset({"blank_line"})


def from_mistune_ast(tokens: Sequence[Mapping[str, Any]]) -> Root:
    """Convert mistune 3 AST tokens (``renderer="ast"``) into a ``Root``."""
    return Root(children=_convert_mistune_tokens(tokens))


def _convert_mistune_tokens(tokens: Sequence[Mapping[str, Any]]) -> tuple[Node, ...]:
    converted: list[Node] = []
    for token in tokens:
        if token.get("type") in _IGNORED_MISTUNE_TYPES:
            continue
        converted.append(_convert_mistune_token(token))
    return tuple(converted)


def _convert_mistune_token(token: Mapping[str, Any]) -> Node:  # noqa: PLR0911
    ntype = token.get("type", "")
    attrs = token.get("attrs", {}) or {}
    children = _convert_mistune_tokens(token.get("children", ()) or ())

    if ntype == "heading":
        return Heading(depth=int(attrs.get("level", 1)), children=children)
    if ntype in ("paragraph", "block_text"):
        return Paragraph(children=children)
    if ntype == "text":
        return Text(value=token.get("raw", ""))
    if ntype == "softbreak":
        return Text(value="\n")
    if ntype == "linebreak":
        return Break()
    if ntype == "strong":
        return Strong(children=children)
    if ntype == "emphasis":
        return Emphasis(children=children)
    if ntype == "strikethrough":
        return Delete(children=children)
    if ntype == "codespan":
        return InlineCode(value=token.get("raw", ""))
    if ntype == "block_code":
        raw = token.get("raw", "")
        info = attrs.get("info", "") or ""
        lang = info.split()[0] if info.strip() else None
        return Code(value=raw[:-1] if raw.endswith("\n") else raw, lang=lang)
    if ntype == "link":
        return Link(url=attrs.get("url", ""), title=attrs.get("title"), children=children)
    if ntype == "list":
        return List(
            ordered=bool(attrs.get("ordered", False)),
            start=attrs.get("start"),
            children=children,
        )
    if ntype == "list_item":
        return ListItem(children=children)
    if ntype == "block_quote":
        return Blockquote(children=children)
    if ntype == "thematic_break":
        return ThematicBreak()
    return UnknownNode(name=ntype, children=children)


def parse_markdown(markdown: str) -> Root:
    """Parse markdown text with mistune and convert it to a ``Root``."""
    md = mistune.create_markdown(renderer="ast", plugins=["strikethrough"])
    tokens: list[dict[str, Any]] = md(markdown)  # type: ignore[assignment]
    return from_mistune_ast(tokens)
