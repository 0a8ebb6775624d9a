"""Tests for indentation and spacing rules."""

from __future__ import annotations

import unittest

from mdcanvas.layout import (
    ListIndent,
    Point,
    bullet_center,
    list_close_gap,
    list_item_indent,
    ordered_content_x,
    ordered_label,
    ordered_numbers,
    paragraph_gap,
    quote_x,
    rule_endpoints,
    unordered_content_x,
)
from mdcanvas.settings import RenderSettings


class QuoteIndentTests(unittest.TestCase):
    def test_quote_offset_is_depth_times_indent(self) -> None:
        settings = RenderSettings()
        self.assertEqual([quote_x(50, depth, settings) for depth in range(4)], [50, 57, 64, 71])


class ListIndentTests(unittest.TestCase):
    def test_first_level_sits_at_margin_plus_offset(self) -> None:
        settings = RenderSettings(ordered_list_indent_offset=7)
        self.assertEqual(
            list_item_indent(72, 1, ordered=True, settings=settings),
            ListIndent(marker_x=79, step=14),
        )
        self.assertEqual(
            list_item_indent(72, 1, ordered=False, settings=settings),
            ListIndent(marker_x=72, step=14),
        )

    def test_each_depth_adds_one_indent_step(self) -> None:
        settings = RenderSettings(ordered_list_indent=10)
        markers = [
            list_item_indent(0, depth, ordered=True, settings=settings).marker_x
            for depth in (1, 2, 3)
        ]
        self.assertEqual(markers, [0, 10, 20])

    def test_content_positions(self) -> None:
        indent = ListIndent(marker_x=72, step=14)
        self.assertEqual(unordered_content_x(indent), 86)
        self.assertEqual(ordered_content_x(indent, 8), 86)
        self.assertEqual(ordered_content_x(indent, 30), 102)
        self.assertEqual(bullet_center(indent, 100), Point(x=73, y=104))

    def test_ordered_numbering(self) -> None:
        self.assertEqual(list(ordered_numbers(None, 3)), [1, 2, 3])
        self.assertEqual(list(ordered_numbers(5, 3)), [5, 6, 7])
        self.assertEqual(list(ordered_numbers(0, 2)), [0, 1])
        self.assertEqual(list(ordered_numbers(3, 0)), [])
        self.assertEqual(ordered_label(12), "12.")


class SpacingTests(unittest.TestCase):
    def test_paragraph_gap_inside_and_outside_lists(self) -> None:
        settings = RenderSettings(paragraph_gap=12, list_item_gap=3)
        self.assertEqual(paragraph_gap(False, settings), 12)
        self.assertEqual(paragraph_gap(True, settings), 3)
        self.assertEqual(list_close_gap(settings), 9)

    def test_rule_spans_between_margins(self) -> None:
        start, end = rule_endpoints(40, 30, 600, 120)
        self.assertEqual(start, Point(x=40, y=120))
        self.assertEqual(end, Point(x=570, y=120))
