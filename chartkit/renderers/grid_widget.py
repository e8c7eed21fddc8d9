"""In-memory table widget."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple
import logging

from ..exceptions import RenderingError
from ..styles.color import Color
from ..styles.style_types import TableStyle
from ..utils.enums import FontFamily, HorizontalAlign, Position, TextSize, VerticalAlign
from .base_renderer import TableWidget

logger = logging.getLogger(__name__)

Call = Tuple[str, Tuple[Any, ...]]


class GridWidget(TableWidget):
    """
    Table widget that keeps the grid in memory.

    Behaves like the host widget: setters outside the grid, or with values of
    the wrong kind, raise :class:`RenderingError`. Every call is logged in
    ``calls`` in the order it was made.
    """

    def __init__(self) -> None:
        self.position: Optional[Position] = None
        self.columns = 0
        self.rows = 0
        self.style: Optional[TableStyle] = None
        self.grid: List[List[Dict[str, Any]]] = []
        self.column_widths: Dict[int, int] = {}
        self.row_heights: Dict[int, int] = {}
        self.calls: List[Call] = []
        self._open = False

    def begin(self, position: Position, columns: int, rows: int,
              style: Optional[TableStyle]) -> None:
        if columns < 0 or rows < 0:
            raise RenderingError("Invalid table size", f"{columns}x{rows}")
        self.position = Position(position)
        self.columns = columns
        self.rows = rows
        self.style = style
        self.grid = [[{} for _ in range(columns)] for _ in range(rows)]
        self.column_widths.clear()
        self.row_heights.clear()
        self.calls = [('begin', (self.position, columns, rows))]
        self._open = True
        logger.debug(f"Grid created: {columns}x{rows} at {self.position.value}")

    # ------------------------------------------------------------------
    # Cell setters
    # ------------------------------------------------------------------
    def set_cell_text(self, column: int, row: int, text: str) -> None:
        self._set('text', column, row, text, str)

    def set_cell_background(self, column: int, row: int, color: Color) -> None:
        self._set('background', column, row, color, Color)

    def set_cell_text_color(self, column: int, row: int, color: Color) -> None:
        self._set('text_color', column, row, color, Color)

    def set_cell_text_size(self, column: int, row: int, size: TextSize) -> None:
        self._set('text_size', column, row, size, TextSize)

    def set_cell_text_font_family(self, column: int, row: int, family: FontFamily) -> None:
        self._set('text_font_family', column, row, family, FontFamily)

    def set_cell_halign(self, column: int, row: int, align: HorizontalAlign) -> None:
        self._set('halign', column, row, align, HorizontalAlign)

    def set_cell_valign(self, column: int, row: int, align: VerticalAlign) -> None:
        self._set('valign', column, row, align, VerticalAlign)

    def set_cell_width(self, column: int, row: int, width: int) -> None:
        self._set('width', column, row, self._size(width), int)

    def set_cell_height(self, column: int, row: int, height: int) -> None:
        self._set('height', column, row, self._size(height), int)

    def set_cell_tooltip(self, column: int, row: int, tooltip: str) -> None:
        self._set('tooltip', column, row, tooltip, str)

    def set_column_width(self, column: int, width: int) -> None:
        self._check_open()
        if not 0 <= column < self.columns:
            raise RenderingError("Column index out of range", f"{column} not in [0, {self.columns})")
        self.column_widths[column] = self._size(width)
        self.calls.append(('set_column_width', (column, width)))

    def set_row_height(self, row: int, height: int) -> None:
        self._check_open()
        if not 0 <= row < self.rows:
            raise RenderingError("Row index out of range", f"{row} not in [0, {self.rows})")
        self.row_heights[row] = self._size(height)
        self.calls.append(('set_row_height', (row, height)))

    def finish(self) -> List[List[Dict[str, Any]]]:
        self._check_open()
        self._open = False
        return self.grid

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, column: int, row: int) -> Dict[str, Any]:
        """Attributes set on the cell at (``column``, ``row``)."""
        return self.grid[row][column]

    def count_calls(self, name: str) -> int:
        return sum(1 for call_name, _ in self.calls if call_name == name)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _set(self, attribute: str, column: int, row: int, value: Any, kind: type) -> None:
        self._check_open()
        if not (0 <= column < self.columns and 0 <= row < self.rows):
            raise RenderingError(
                "Cell index out of range",
                f"({column}, {row}) outside {self.columns}x{self.rows}",
            )
        if not isinstance(value, kind):
            raise RenderingError(f"Invalid {attribute} value", repr(value))
        self.grid[row][column][attribute] = value
        self.calls.append((f"set_cell_{attribute}", (column, row, value)))

    def _check_open(self) -> None:
        if not self._open:
            raise RenderingError("Table widget used before begin()")

    @staticmethod
    def _size(value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise RenderingError("Invalid size", repr(value))
        return value
