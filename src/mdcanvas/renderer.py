"""Render a markdown syntax tree onto a document sink."""

from __future__ import annotations

import logging
import re

from . import layout
from .dispatch import Dispatcher
from .drawing import DocumentSink, TextOptions
from .errors import NestingTooDeep
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
)
from .settings import RenderSettings
from .style import StyleContext, current_font

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


class MarkdownRenderer:
    """Walk a syntax tree depth-first and drive the sink as it goes.

    The renderer keeps no per-pass state of its own: style and nesting are
    carried by the ``StyleContext`` handed down the recursion.
    """

    def __init__(self, sink: DocumentSink, settings: RenderSettings | None = None) -> None:
        self._sink = sink
        self._settings = settings or RenderSettings()
        self._dispatcher = Dispatcher(report_unsupported=self._settings.report_unsupported)
        self._dispatcher.register_many(
            {
                Root.KIND: self._render_container,
                ListItem.KIND: self._render_container,
                Paragraph.KIND: self._render_paragraph,
                Heading.KIND: self._render_heading,
                Text.KIND: self._render_text,
                Strong.KIND: self._render_strong,
                Emphasis.KIND: self._render_emphasis,
                Delete.KIND: self._render_delete,
                Link.KIND: self._render_link,
                Break.KIND: self._render_break,
                InlineCode.KIND: self._render_inline_code,
                Code.KIND: self._render_code,
                List.KIND: self._render_list,
                Blockquote.KIND: self._render_blockquote,
                ThematicBreak.KIND: self._render_thematic_break,
            }
        )

    @property
    def settings(self) -> RenderSettings:
        return self._settings

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def render(self, tree: Root) -> None:
        """Render every top-level child of ``tree``."""
        logger.debug("rendering tree with %d top-level node(s)", len(tree.children))
        context = StyleContext()
        self._sink.font_size(self._settings.font_size)
        self._sink.font(current_font(context, self._settings))
        self._render_children(tree, context)

    def _render_children(self, node: Node, context: StyleContext) -> None:
        for child in node.children:
            self._dispatcher.dispatch(child, self._descend(context))

    def _descend(self, context: StyleContext) -> StyleContext:
        child = context.descend()
        limit = self._settings.max_nesting_depth
        if limit is not None and child.tree_depth > limit:
            raise NestingTooDeep(child.tree_depth, limit)
        return child

    def _restore_font(self, context: StyleContext) -> None:
        self._sink.font(current_font(context, self._settings))

    # -- Inline handlers -------------------------------------------------------

    def _render_text(self, node: Text, context: StyleContext) -> None:
        self._sink.text(
            _WHITESPACE_RUN.sub(" ", node.value),
            TextOptions(
                continued=True,
                link=context.link,
                underline=bool(context.link),
                strike=context.is_struck,
            ),
        )

    def _render_styled(self, node: Node, inner: StyleContext, outer: StyleContext) -> None:
        self._restore_font(inner)
        self._render_children(node, inner)
        self._restore_font(outer)

    def _render_strong(self, node: Node, context: StyleContext) -> None:
        self._render_styled(node, context.enter(bold=True), context)

    def _render_emphasis(self, node: Node, context: StyleContext) -> None:
        self._render_styled(node, context.enter(italic=True), context)

    def _render_delete(self, node: Node, context: StyleContext) -> None:
        self._render_children(node, context.enter(strike=True))

    def _render_link(self, node: Link, context: StyleContext) -> None:
        self._render_children(node, context.with_link(node.url))

    def _render_break(self, node: Node, context: StyleContext) -> None:
        self._sink.text("\n", TextOptions(paragraph_gap=0))

    def _render_inline_code(self, node: InlineCode, context: StyleContext) -> None:
        self._sink.font(self._settings.code_font)
        self._sink.text(node.value, TextOptions(continued=True))
        self._restore_font(context)

    # -- Block handlers --------------------------------------------------------

    def _render_container(self, node: Node, context: StyleContext) -> None:
        self._render_children(node, context)

    def _render_paragraph(self, node: Node, context: StyleContext) -> None:
        self._render_children(node, context)
        self._sink.text(
            "\n",
            TextOptions(paragraph_gap=layout.paragraph_gap(context.in_list, self._settings)),
        )

    def _render_heading(self, node: Heading, context: StyleContext) -> None:
        settings = self._settings
        self._sink.y += settings.heading_gap_before(node.depth)
        self._sink.font(settings.heading_font_name(node.depth))
        self._sink.font_size(settings.heading_font_size(node.depth))
        self._render_children(node, context)
        self._sink.text("\n")
        self._restore_font(context)
        self._sink.font_size(settings.font_size)
        self._sink.y += settings.heading_gap_after(node.depth)

    def _render_code(self, node: Code, context: StyleContext) -> None:
        self._sink.font(self._settings.code_font)
        self._sink.text(node.value)
        self._restore_font(context)

    def _render_thematic_break(self, node: Node, context: StyleContext) -> None:
        margins = self._sink.margins
        start, end = layout.rule_endpoints(
            margins.left, margins.right, self._sink.page_width, self._sink.y
        )
        self._sink.line(start.x, start.y, end.x, end.y)
        self._sink.text("\n", TextOptions(paragraph_gap=0))

    def _render_blockquote(self, node: Node, context: StyleContext) -> None:
        inner = context.enter(quote_level=True)
        left = self._sink.margins.left
        self._sink.x = layout.quote_x(left, inner.quote_depth, self._settings)
        self._render_children(node, inner)
        self._sink.x = layout.quote_x(left, context.quote_depth, self._settings)

    def _render_list(self, node: List, context: StyleContext) -> None:
        inner = context.enter(list_level=True)
        if node.ordered:
            numbers = layout.ordered_numbers(node.start, len(node.children))
            for number, item in zip(numbers, node.children, strict=True):
                self._render_ordered_item(item, number, self._descend(inner))
        else:
            for item in node.children:
                self._render_unordered_item(item, self._descend(inner))
        if not context.in_list:
            self._sink.y += layout.list_close_gap(self._settings)

    def _render_ordered_item(self, item: Node, number: int, context: StyleContext) -> None:
        left = self._sink.margins.left
        indent = layout.list_item_indent(
            left, context.list_depth, ordered=True, settings=self._settings
        )
        label = layout.ordered_label(number)
        self._sink.ensure_space(self._settings.font_size)
        self._sink.move_to(indent.marker_x, self._sink.y)
        self._sink.text(label, TextOptions(continued=True))
        self._sink.x = layout.ordered_content_x(indent, self._sink.string_width(label))
        self._render_children(item, context)
        self._sink.x = left

    def _render_unordered_item(self, item: Node, context: StyleContext) -> None:
        left = self._sink.margins.left
        indent = layout.list_item_indent(
            left, context.list_depth, ordered=False, settings=self._settings
        )
        self._sink.ensure_space(self._settings.font_size)
        self._sink.x = layout.unordered_content_x(indent)
        center = layout.bullet_center(indent, self._sink.y)
        self._sink.circle(center.x, center.y, self._settings.bullet_radius)
        self._render_children(item, context)
        self._sink.x = left


def render(
    tree: Root,
    sink: DocumentSink,
    settings: RenderSettings | None = None,
) -> None:
    """Render ``tree`` onto ``sink`` with a fresh renderer."""
    MarkdownRenderer(sink, settings).render(tree)
