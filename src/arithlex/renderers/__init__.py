"""Renderers for analysis results."""

from arithlex.renderers.table import TableRenderer, format_error, render_table

__all__ = ["TableRenderer", "format_error", "render_table"]
