"""Rendering package: widget interface, renderer adapter and widgets."""

from __future__ import annotations

from .base_renderer import TableWidget
from .grid_widget import GridWidget
from .pdf_widget import PdfTableWidget, PdfWidgetConfig, to_pdf_color
from .table_renderer import RenderStats, TableRenderer, render_table


__all__ = [
    "TableWidget",
    "GridWidget",
    "PdfTableWidget",
    "PdfWidgetConfig",
    "to_pdf_color",
    "RenderStats",
    "TableRenderer",
    "render_table",
]
