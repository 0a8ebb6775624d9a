"""Document sink contract and the ReportLab-backed implementation."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Protocol

from reportlab.lib import colors
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from .config import DEFAULT_MARGIN, DEFAULT_PAGE_SIZE, LINE_HEIGHT_FACTOR, Fonts

logger = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(r"(\s+)")


@dataclass(frozen=True)
class Margins:
    """Page margins in points."""

    left: float = DEFAULT_MARGIN
    top: float = DEFAULT_MARGIN
    right: float = DEFAULT_MARGIN
    bottom: float = DEFAULT_MARGIN


@dataclass(frozen=True)
class TextOptions:
    """Per-emission text options.

    ``continued`` keeps the cursor on the current line after the text.
    ``line_break=False`` suppresses the trailing line break without marking
    the text as continued. ``paragraph_gap`` is added below the line when it
    ends.
    """

    continued: bool = False
    link: str | None = None
    underline: bool = False
    strike: bool = False
    line_break: bool = True
    paragraph_gap: float = 0


class DocumentSink(Protocol):
    """Paginated canvas driven by the renderer.

    Coordinates are top-down: ``y`` grows towards the bottom of the page.
    """

    x: float
    y: float

    @property
    def margins(self) -> Margins: ...
    @property
    def page_width(self) -> float: ...
    def font(self, name: str) -> None: ...
    def font_size(self, size: float) -> None: ...
    def text(self, value: str, options: TextOptions = ...) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...
    def circle(self, x: float, y: float, radius: float, *, fill: bool = True) -> None: ...
    def string_width(self, value: str) -> float: ...
    def ensure_space(self, height: float) -> None: ...


class ReportLabDocumentSink:
    """ReportLab-backed implementation of DocumentSink.

    Text flows from the cursor and wraps at the right margin back to the
    x position last assigned to the cursor. Pages are added when a line
    would cross the bottom margin.
    """

    def __init__(
        self,
        target: canvas.Canvas,
        *,
        pagesize: tuple[float, float] = DEFAULT_PAGE_SIZE,
        margins: Margins | None = None,
    ) -> None:
        self._target = target
        self._page_width, self._page_height = pagesize
        self._margins = margins or Margins()
        if self._margins.left + self._margins.right >= self._page_width:
            msg = "horizontal margins leave no room for content."
            raise ValueError(msg)
        if self._margins.top + self._margins.bottom >= self._page_height:
            msg = "vertical margins leave no room for content."
            raise ValueError(msg)
        self._font_name = Fonts.NORMAL
        self._font_size = 12.0
        self._x = self._margins.left
        self._wrap_left = self._margins.left
        self.y = self._margins.top
        self._line_height = 0.0
        self._page_count = 1
        self._apply_font()

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = value
        self._wrap_left = value

    @property
    def margins(self) -> Margins:
        return self._margins

    @property
    def page_width(self) -> float:
        return self._page_width

    @property
    def page_height(self) -> float:
        return self._page_height

    @property
    def page_count(self) -> int:
        return self._page_count

    def font(self, name: str) -> None:
        self._font_name = name
        self._apply_font()

    def font_size(self, size: float) -> None:
        self._font_size = size
        self._apply_font()

    def string_width(self, value: str) -> float:
        return pdfmetrics.stringWidth(value, self._font_name, self._font_size)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._target.setStrokeColor(colors.black)
        self._target.line(x1, self._flip(y1), x2, self._flip(y2))

    def circle(self, x: float, y: float, radius: float, *, fill: bool = True) -> None:
        self._target.setFillColor(colors.black)
        self._target.circle(x, self._flip(y), radius, fill=int(fill), stroke=0)

    def ensure_space(self, height: float) -> None:
        """Start a new page unless ``height`` fits above the bottom margin.

        At least one line of the current font is always reserved, so a
        marker drawn after this call shares its page with the line's text.
        """
        needed = max(height, self._leading())
        if self.y + needed > self._page_height - self._margins.bottom:
            self._new_page()

    def text(self, value: str, options: TextOptions = TextOptions()) -> None:
        parts = value.split("\n")
        if value.endswith("\n"):
            parts.pop()
        for index, part in enumerate(parts):
            if index > 0:
                self._end_line(0)
            self._write(part, options)
        if not options.continued and options.line_break:
            self._end_line(options.paragraph_gap)

    def set_title(self, title: str) -> None:
        self._target.setTitle(title)

    def save(self) -> None:
        self._target.save()

    def _apply_font(self) -> None:
        self._target.setFont(self._font_name, self._font_size)

    def _leading(self) -> float:
        return self._font_size * LINE_HEIGHT_FACTOR

    def _flip(self, y: float) -> float:
        return self._page_height - y

    def _new_page(self) -> None:
        self._target.showPage()
        self._page_count += 1
        self._apply_font()
        self.y = self._margins.top
        self._line_height = 0.0
        logger.debug("started page %d", self._page_count)

    def _end_line(self, gap: float) -> None:
        self.y += (self._line_height or self._leading()) + gap
        self._x = self._wrap_left
        self._line_height = 0.0

    def _write(self, value: str, options: TextOptions) -> None:
        right_limit = self._page_width - self._margins.right
        for token in _TOKEN_PATTERN.split(value):
            if not token:
                continue
            width = self.string_width(token)
            if self._x + width > right_limit and self._x > self._wrap_left:
                self._end_line(0)
                if token.isspace():
                    continue
            self.ensure_space(self._leading())
            self._draw_token(token, width, options)

    def _draw_token(self, token: str, width: float, options: TextOptions) -> None:
        baseline = self._flip(self.y + self._font_size)
        self._target.setFillColor(colors.black)
        self._target.drawString(self._x, baseline, token)
        decorations: list[float] = []
        if options.underline:
            decorations.append(baseline - self._font_size * 0.12)
        if options.strike:
            decorations.append(baseline + self._font_size * 0.3)
        if decorations:
            self._target.setStrokeColor(colors.black)
            self._target.setLineWidth(max(self._font_size / 20, 0.5))
            for line_y in decorations:
                self._target.line(self._x, line_y, self._x + width, line_y)
        if options.link:
            rect = (self._x, baseline - 2, self._x + width, baseline + self._font_size)
            self._target.linkURL(options.link, rect, relative=0, thickness=0)
        self._x += width
        self._line_height = max(self._line_height, self._leading())


def create_reportlab_sink(
    output_path: str,
    *,
    pagesize: tuple[float, float] = DEFAULT_PAGE_SIZE,
    margins: Margins | None = None,
) -> ReportLabDocumentSink:
    """Create a ReportLab-backed document sink writing to ``output_path``."""
    return ReportLabDocumentSink(
        canvas.Canvas(output_path, pagesize=pagesize),
        pagesize=pagesize,
        margins=margins,
    )
