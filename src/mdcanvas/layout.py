"""Pure indentation and spacing rules."""

from __future__ import annotations

from dataclasses import dataclass

from .settings import RenderSettings

# Bullet centre relative to the item indent and the top of the line.
_BULLET_X_OFFSET = 1.0
_BULLET_Y_OFFSET = 4.0


@dataclass(frozen=True)
class Point:
    """2D point in top-down page units."""

    x: float
    y: float


@dataclass(frozen=True)
class ListIndent:
    """Resolved horizontal geometry for one list item."""

    marker_x: float
    step: float


def quote_x(left_margin: float, quote_depth: int, settings: RenderSettings) -> float:
    """Return the cursor x for content at the given block quote depth."""
    return left_margin + quote_depth * settings.block_quote_indent


def list_item_indent(
    left_margin: float,
    list_depth: int,
    *,
    ordered: bool,
    settings: RenderSettings,
) -> ListIndent:
    """Return the marker position and per-depth indent for a list item.

    ``list_depth`` counts from 1 for an outermost list.
    """
    if ordered:
        step = settings.ordered_list_indent
        offset = settings.ordered_list_indent_offset
    else:
        step = settings.unordered_list_indent
        offset = settings.unordered_list_indent_offset
    marker_x = left_margin + max(list_depth - 1, 0) * step + offset
    return ListIndent(marker_x=marker_x, step=step)


def bullet_center(indent: ListIndent, line_top: float) -> Point:
    return Point(x=indent.marker_x + _BULLET_X_OFFSET, y=line_top + _BULLET_Y_OFFSET)


def unordered_content_x(indent: ListIndent) -> float:
    return indent.marker_x + indent.step


def ordered_content_x(indent: ListIndent, label_width: float) -> float:
    """Return where item content starts after a numeral label.

    The label may be wider than the configured indent (e.g. "100.").
    """
    return indent.marker_x + max(label_width, indent.step)


def ordered_label(number: int) -> str:
    return f"{number}."


def ordered_numbers(start: int | None, count: int) -> range:
    """Return the item numbers of an ordered list, counting up from ``start``."""
    first = 1 if start is None else start
    return range(first, first + count)


def paragraph_gap(in_list: bool, settings: RenderSettings) -> float:
    """Return the gap below a paragraph; list items use the tighter gap."""
    return settings.list_item_gap if in_list else settings.paragraph_gap


def list_close_gap(settings: RenderSettings) -> float:
    """Return the extra gap added once the outermost list closes."""
    return settings.paragraph_gap - settings.list_item_gap


def rule_endpoints(
    left_margin: float,
    right_margin: float,
    page_width: float,
    y: float,
) -> tuple[Point, Point]:
    """Return the endpoints of a thematic break spanning the content width."""
    return Point(x=left_margin, y=y), Point(x=page_width - right_margin, y=y)
