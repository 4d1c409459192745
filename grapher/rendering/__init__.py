"""Fixed-width text rendering of table stores."""

from .formatter import FormatError, format_cell, format_header, horizontal_rule
from .renderer import print_tables, render_tables

__all__ = [
    "FormatError",
    "format_cell",
    "format_header",
    "horizontal_rule",
    "print_tables",
    "render_tables",
]
