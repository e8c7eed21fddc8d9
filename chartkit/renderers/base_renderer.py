"""Base classes and interfaces for table widgets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..styles.color import Color
from ..styles.style_types import TableStyle
from ..utils.enums import FontFamily, HorizontalAlign, Position, TextSize, VerticalAlign


class TableWidget(ABC):
    """
    Interface of a host table widget.

    The widget is created for a fixed grid and then receives one setter call
    per cell attribute. Indices are ``(column, row)`` as on the host.
    """

    @abstractmethod
    def begin(self, position: Position, columns: int, rows: int,
              style: Optional[TableStyle]) -> None:
        """Create the grid and apply table-level background, frame and border."""

    @abstractmethod
    def set_cell_text(self, column: int, row: int, text: str) -> None:
        """Set the text of a cell."""

    @abstractmethod
    def set_cell_background(self, column: int, row: int, color: Color) -> None:
        """Set the background color of a cell."""

    @abstractmethod
    def set_cell_text_color(self, column: int, row: int, color: Color) -> None:
        """Set the text color of a cell."""

    @abstractmethod
    def set_cell_text_size(self, column: int, row: int, size: TextSize) -> None:
        """Set the text size of a cell."""

    @abstractmethod
    def set_cell_text_font_family(self, column: int, row: int, family: FontFamily) -> None:
        """Set the font family of a cell."""

    @abstractmethod
    def set_cell_halign(self, column: int, row: int, align: HorizontalAlign) -> None:
        """Set the horizontal text alignment of a cell."""

    @abstractmethod
    def set_cell_valign(self, column: int, row: int, align: VerticalAlign) -> None:
        """Set the vertical text alignment of a cell."""

    @abstractmethod
    def set_cell_width(self, column: int, row: int, width: int) -> None:
        """Set the width of a cell."""

    @abstractmethod
    def set_cell_height(self, column: int, row: int, height: int) -> None:
        """Set the height of a cell."""

    @abstractmethod
    def set_cell_tooltip(self, column: int, row: int, tooltip: str) -> None:
        """Set the tooltip of a cell."""

    def set_column_width(self, column: int, width: int) -> None:
        """Set the width of a whole column. Widgets without column sizing ignore it."""

    def set_row_height(self, row: int, height: int) -> None:
        """Set the height of a whole row. Widgets without row sizing ignore it."""

    def finish(self) -> Any:
        """Complete the table and return whatever the widget produces."""
        return None
