"""In-memory document sink that records every primitive call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .drawing import Margins, TextOptions


@dataclass(frozen=True)
class Operation:
    """One recorded sink call."""

    name: str
    args: tuple[Any, ...] = ()


@dataclass
class RecordingSink:
    """DocumentSink double for tests and layout previews.

    Glyph widths are a fixed fraction of the font size, lines never wrap and
    pages never break. Cursor assignments are recorded as ``set_x``/``set_y``.
    """

    margins: Margins = field(default_factory=Margins)
    page_width: float = 612
    char_width_factor: float = 0.5
    operations: list[Operation] = field(default_factory=list)
    current_font: str = ""
    current_size: float = 0
    _x: float = field(default=0.0, init=False)
    _y: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self._x = self.margins.left
        self._y = self.margins.top

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = value
        self._record("set_x", value)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = value
        self._record("set_y", value)

    def font(self, name: str) -> None:
        self.current_font = name
        self._record("font", name)

    def font_size(self, size: float) -> None:
        self.current_size = size
        self._record("font_size", size)

    def text(self, value: str, options: TextOptions = TextOptions()) -> None:
        self._record("text", value, options, self.current_font)

    def move_to(self, x: float, y: float) -> None:
        self._x = x
        self._y = y
        self._record("move_to", x, y)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._record("line", x1, y1, x2, y2)

    def circle(self, x: float, y: float, radius: float, *, fill: bool = True) -> None:
        self._record("circle", x, y, radius, fill)

    def string_width(self, value: str) -> float:
        return len(value) * self.current_size * self.char_width_factor

    def ensure_space(self, height: float) -> None:
        self._record("ensure_space", height)

    def named(self, name: str) -> list[Operation]:
        """Return recorded operations with the given name, in order."""
        return [operation for operation in self.operations if operation.name == name]

    def _record(self, name: str, *args: Any) -> None:
        self.operations.append(Operation(name=name, args=args))
