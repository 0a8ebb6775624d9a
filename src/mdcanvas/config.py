"""Configuration constants for markdown canvas rendering."""

from reportlab.lib.pagesizes import A4

# Page geometry for the ReportLab sink, in points.
DEFAULT_PAGE_SIZE = A4
DEFAULT_MARGIN = 72

# File output
DEFAULT_FILENAME = "document.pdf"

# Line height as a multiple of the font size.
LINE_HEIGHT_FACTOR = 1.2


class Fonts:
    """Built-in PDF font names used by the default settings."""

    NORMAL = "Helvetica"
    BOLD = "Helvetica-Bold"
    ITALIC = "Helvetica-Oblique"
    BOLD_ITALIC = "Helvetica-BoldOblique"
    CODE = "Courier"
    HEADING = "Helvetica-Bold"
