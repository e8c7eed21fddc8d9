"""
Styles module for chart tables.

Color values, immutable style records and the algebra that cascades them.
"""

from .color import Color, NAMED_COLORS, color_equals, contrast_color, luminosity, parse_color
from .style_algebra import Mergeable, equals, get_style_change, inherit, is_unset
from .style_types import CellAlign, LineStyle, StyleRecord, TableStyle, TextStyle

__all__ = [
    "Color",
    "NAMED_COLORS",
    "color_equals",
    "contrast_color",
    "luminosity",
    "parse_color",
    "Mergeable",
    "equals",
    "get_style_change",
    "inherit",
    "is_unset",
    "CellAlign",
    "LineStyle",
    "StyleRecord",
    "TableStyle",
    "TextStyle",
]
