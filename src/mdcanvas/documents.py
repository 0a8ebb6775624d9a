"""PDF generation facade and public API."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import DEFAULT_FILENAME, DEFAULT_PAGE_SIZE
from .drawing import Margins, create_reportlab_sink
from .nodes import Root
from .renderer import MarkdownRenderer
from .settings import RenderSettings

logger = logging.getLogger(__name__)


def generate_pdf(
    tree: Root,
    output_path: str | Path | None = None,
    *,
    pagesize: tuple[float, float] = DEFAULT_PAGE_SIZE,
    margins: Margins | None = None,
    settings: RenderSettings | None = None,
    title: str | None = None,
) -> Path:
    """Render ``tree`` into a new PDF file and return the output path."""
    if not isinstance(tree, Root):
        msg = f"tree must be a Root node, got '{type(tree).__name__}'."
        raise ValueError(msg)

    destination = Path(output_path or DEFAULT_FILENAME)
    destination.parent.mkdir(parents=True, exist_ok=True)

    sink = create_reportlab_sink(str(destination), pagesize=pagesize, margins=margins)
    if title:
        sink.set_title(title)
    MarkdownRenderer(sink, settings).render(tree)
    sink.save()
    logger.info("wrote %d page(s) to %s", sink.page_count, destination)
    return destination


__all__ = [
    "generate_pdf",
]
