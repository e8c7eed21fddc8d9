"""
chartkit - table and color utilities for chart scripts.

This package builds styled tables for a chart pane and hands them to a table
widget. It covers:

- Color values, luminosity and readable foreground selection
- Immutable style records with na-aware equality, inheritance and diffing
- A declarative table document (table / column / row / cell)
- Cascade resolution of effective cell styles
- Rendering onto table widgets (in-memory grid, PDF via reportlab)
- Aggregation of trading signals into report tables

Main Components:
- Styles: colors, style records, style algebra
- Models: table document
- Builder: append-only construction helpers
- Engine: cascade resolver
- Renderers: widget interface and adapters
- Reporting: signal aggregation
- Utils: enumerations and logging setup
"""

from .exceptions import ChartkitError, RenderingError, StyleError
from .config import CascadeConfig
from .utils.enums import FontFamily, HorizontalAlign, Position, SignalDirection, TextSize, VerticalAlign
from .styles import (
    CellAlign,
    Color,
    LineStyle,
    TableStyle,
    TextStyle,
    color_equals,
    contrast_color,
    equals,
    get_style_change,
    inherit,
    luminosity,
    parse_color,
)
from .models import Cell, Column, Row, Table
from .builder import add_cell, add_column, add_row, create_table
from .engine import CascadeResolver, ResolvedCell, ResolvedTable, resolve_table
from .renderers import GridWidget, PdfTableWidget, PdfWidgetConfig, TableRenderer, TableWidget, render_table
from .reporting import Signal, SignalAggregator, SignalReportConfig

__version__ = "0.1.0"

__all__ = [
    "ChartkitError",
    "RenderingError",
    "StyleError",
    "CascadeConfig",
    "FontFamily",
    "HorizontalAlign",
    "Position",
    "SignalDirection",
    "TextSize",
    "VerticalAlign",
    "CellAlign",
    "Color",
    "LineStyle",
    "TableStyle",
    "TextStyle",
    "color_equals",
    "contrast_color",
    "equals",
    "get_style_change",
    "inherit",
    "luminosity",
    "parse_color",
    "Cell",
    "Column",
    "Row",
    "Table",
    "add_cell",
    "add_column",
    "add_row",
    "create_table",
    "CascadeResolver",
    "ResolvedCell",
    "ResolvedTable",
    "resolve_table",
    "GridWidget",
    "PdfTableWidget",
    "PdfWidgetConfig",
    "TableRenderer",
    "TableWidget",
    "render_table",
    "Signal",
    "SignalAggregator",
    "SignalReportConfig",
]
