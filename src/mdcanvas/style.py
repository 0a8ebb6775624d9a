"""Scoped style state carried through one render pass."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .settings import RenderSettings


@dataclass(frozen=True)
class StyleContext:
    """Active decorations and nesting depths at one point of the traversal.

    Contexts are values: a handler derives a child context for its subtree
    and keeps its own, so the parent state is back in effect as soon as the
    subtree returns or raises. Bold, italic and strike are nesting counts so
    that same-kind nesting stays active until the outermost span closes.
    """

    bold: int = 0
    italic: int = 0
    strike: int = 0
    link: str | None = None
    list_depth: int = 0
    quote_depth: int = 0
    tree_depth: int = 0

    @property
    def is_bold(self) -> bool:
        return self.bold > 0

    @property
    def is_italic(self) -> bool:
        return self.italic > 0

    @property
    def is_struck(self) -> bool:
        return self.strike > 0

    @property
    def in_list(self) -> bool:
        return self.list_depth > 0

    def enter(
        self,
        *,
        bold: bool = False,
        italic: bool = False,
        strike: bool = False,
        list_level: bool = False,
        quote_level: bool = False,
    ) -> StyleContext:
        """Return the context for a child subtree."""
        return replace(
            self,
            bold=self.bold + int(bold),
            italic=self.italic + int(italic),
            strike=self.strike + int(strike),
            list_depth=self.list_depth + int(list_level),
            quote_depth=self.quote_depth + int(quote_level),
        )

    def with_link(self, url: str | None) -> StyleContext:
        """Return the context for the children of a link."""
        return replace(self, link=url)

    def descend(self) -> StyleContext:
        """Return the context one tree level deeper, with style unchanged."""
        return replace(self, tree_depth=self.tree_depth + 1)


def current_font(context: StyleContext, settings: RenderSettings) -> str:
    """Return the font name matching the context's bold and italic state."""
    if context.is_bold and context.is_italic:
        return settings.bold_italic_font
    if context.is_bold:
        return settings.bold_font
    if context.is_italic:
        return settings.italic_font
    return settings.normal_font
