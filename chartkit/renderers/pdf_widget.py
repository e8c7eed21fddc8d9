"""Table widget drawing onto a reportlab canvas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import logging

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import Table as PdfTable
from reportlab.platypus import TableStyle as PdfTableStyle

from ..exceptions import RenderingError
from ..styles.color import Color
from ..styles.style_types import TableStyle
from ..utils.enums import FontFamily, HorizontalAlign, Position, TextSize, VerticalAlign
from .base_renderer import TableWidget

logger = logging.getLogger(__name__)


_HALIGN = {
    HorizontalAlign.LEFT: "LEFT",
    HorizontalAlign.CENTER: "CENTER",
    HorizontalAlign.RIGHT: "RIGHT",
}

_VALIGN = {
    VerticalAlign.TOP: "TOP",
    VerticalAlign.CENTER: "MIDDLE",
    VerticalAlign.BOTTOM: "BOTTOM",
}


@dataclass(frozen=True)
class PdfWidgetConfig:
    """
    Layout settings of :class:`PdfTableWidget`.

    Attributes:
        page_size: Page size in points, used to place the table.
        margin: Distance in points between the table and the page edge.
        table_width: Width in points that cell width percentages refer to.
        table_height: Height in points that cell height percentages refer to.
        padding: Cell padding in points.
        text_sizes: Font size in points per text size.
        font_names: reportlab font face per font family.
    """

    page_size: Tuple[float, float] = A4
    margin: float = 36.0
    table_width: float = 523.0
    table_height: float = 770.0
    padding: float = 3.0
    text_sizes: Dict[TextSize, float] = field(default_factory=lambda: {
        TextSize.AUTO: 9.0,
        TextSize.TINY: 6.0,
        TextSize.SMALL: 8.0,
        TextSize.NORMAL: 10.0,
        TextSize.LARGE: 14.0,
        TextSize.HUGE: 20.0,
    })
    font_names: Dict[FontFamily, str] = field(default_factory=lambda: {
        FontFamily.DEFAULT: "Helvetica",
        FontFamily.MONOSPACE: "Courier",
    })


def to_pdf_color(color: Color) -> colors.Color:
    """Convert a chart color to a reportlab color."""
    return colors.Color(color.r / 255, color.g / 255, color.b / 255,
                        alpha=(100 - color.transparency) / 100)


class PdfTableWidget(TableWidget):
    """
    Collect cell attributes as reportlab table style commands and draw the
    table on ``finish``.

    Cell widths and heights are percentages of ``table_width`` and
    ``table_height``; a column takes the widest cell width set in it.
    Tooltips are drawn as text annotations over their cells.
    """

    def __init__(self, canvas: Canvas, config: Optional[PdfWidgetConfig] = None) -> None:
        self.canvas = canvas
        self.config = config or PdfWidgetConfig()
        self.position = Position.TOP_RIGHT
        self.data: List[List[str]] = []
        self.commands: List[tuple] = []
        self.col_widths: List[Optional[float]] = []
        self.row_heights: List[Optional[float]] = []
        self.tooltips: Dict[Tuple[int, int], str] = {}
        self._columns = 0
        self._rows = 0

    def begin(self, position: Position, columns: int, rows: int,
              style: Optional[TableStyle]) -> None:
        self.position = Position(position)
        self._columns = columns
        self._rows = rows
        self.data = [["" for _ in range(columns)] for _ in range(rows)]
        self.col_widths = [None] * columns
        self.row_heights = [None] * rows
        self.tooltips = {}
        self.commands = self._base_table_style(style)

    # ------------------------------------------------------------------
    # Cell setters
    # ------------------------------------------------------------------
    def set_cell_text(self, column: int, row: int, text: str) -> None:
        self._check(column, row)
        self.data[row][column] = text

    def set_cell_background(self, column: int, row: int, color: Color) -> None:
        self._cell_command("BACKGROUND", column, row, to_pdf_color(color))

    def set_cell_text_color(self, column: int, row: int, color: Color) -> None:
        self._cell_command("TEXTCOLOR", column, row, to_pdf_color(color))

    def set_cell_text_size(self, column: int, row: int, size: TextSize) -> None:
        points = self.config.text_sizes.get(TextSize(size))
        self._cell_command("FONTSIZE", column, row, points)
        self._cell_command("LEADING", column, row, points * 1.2)

    def set_cell_text_font_family(self, column: int, row: int, family: FontFamily) -> None:
        self._cell_command("FONTNAME", column, row, self.config.font_names[FontFamily(family)])

    def set_cell_halign(self, column: int, row: int, align: HorizontalAlign) -> None:
        self._cell_command("ALIGN", column, row, _HALIGN[HorizontalAlign(align)])

    def set_cell_valign(self, column: int, row: int, align: VerticalAlign) -> None:
        self._cell_command("VALIGN", column, row, _VALIGN[VerticalAlign(align)])

    def set_cell_width(self, column: int, row: int, width: int) -> None:
        self._check(column, row)
        points = self.config.table_width * width / 100
        current = self.col_widths[column]
        self.col_widths[column] = points if current is None else max(current, points)

    def set_cell_height(self, column: int, row: int, height: int) -> None:
        self._check(column, row)
        points = self.config.table_height * height / 100
        current = self.row_heights[row]
        self.row_heights[row] = points if current is None else max(current, points)

    def set_cell_tooltip(self, column: int, row: int, tooltip: str) -> None:
        self._check(column, row)
        self.tooltips[(column, row)] = tooltip

    def set_column_width(self, column: int, width: int) -> None:
        if not 0 <= column < self._columns:
            raise RenderingError("Column index out of range", str(column))
        self.col_widths[column] = self.config.table_width * width / 100

    def set_row_height(self, row: int, height: int) -> None:
        if not 0 <= row < self._rows:
            raise RenderingError("Row index out of range", str(row))
        self.row_heights[row] = self.config.table_height * height / 100

    def finish(self) -> Optional[PdfTable]:
        """Draw the table at its anchor and return the reportlab table."""
        if not self.data or self._columns == 0:
            logger.debug("Empty table, nothing drawn")
            return None

        table = PdfTable(self.data, colWidths=self.col_widths, rowHeights=self.row_heights)
        table.setStyle(PdfTableStyle(self.commands))

        page_width, page_height = self.config.page_size
        margin = self.config.margin
        width, height = table.wrapOn(self.canvas, page_width - 2 * margin, page_height - 2 * margin)
        x, y = self._anchor(width, height)
        table.drawOn(self.canvas, x, y)
        self._annotate_tooltips(table, x, y + height)
        logger.debug(f"Drew {self._columns}x{self._rows} table at ({x:.1f}, {y:.1f})")
        return table

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _base_table_style(self, style: Optional[TableStyle]) -> List[tuple]:
        config = self.config
        commands: List[tuple] = [
            ("FONT", (0, 0), (-1, -1), config.font_names[FontFamily.DEFAULT],
             config.text_sizes[TextSize.AUTO]),
            ("LEFTPADDING", (0, 0), (-1, -1), config.padding),
            ("RIGHTPADDING", (0, 0), (-1, -1), config.padding),
            ("TOPPADDING", (0, 0), (-1, -1), config.padding),
            ("BOTTOMPADDING", (0, 0), (-1, -1), config.padding),
        ]
        if style is None:
            return commands

        if style.background_color is not None:
            commands.append(("BACKGROUND", (0, 0), (-1, -1), to_pdf_color(style.background_color)))

        frame = style.frame
        if frame is not None and frame.color is not None and frame.width:
            commands.append(("BOX", (0, 0), (-1, -1), frame.width, to_pdf_color(frame.color)))

        border = style.border
        if border is not None and border.color is not None and border.width:
            commands.append(("INNERGRID", (0, 0), (-1, -1), border.width, to_pdf_color(border.color)))

        return commands

    def cell_rect(self, table: PdfTable, column: int, row: int,
                  left: float, top: float) -> Tuple[float, float, float, float]:
        """Page rectangle (x0, y0, x1, y1) of a cell of a wrapped table."""
        col_widths = table._colWidths
        row_heights = table._rowHeights
        x0 = left + sum(col_widths[:column])
        y1 = top - sum(row_heights[:row])
        return x0, y1 - row_heights[row], x0 + col_widths[column], y1

    def _annotate_tooltips(self, table: PdfTable, left: float, top: float) -> None:
        # Tooltips become PDF text annotations over the cell area.
        for (column, row), tooltip in sorted(self.tooltips.items()):
            rect = self.cell_rect(table, column, row, left, top)
            self.canvas.textAnnotation(tooltip, Rect=rect, relative=0)
        if self.tooltips:
            logger.debug(f"Added {len(self.tooltips)} tooltip annotations")

    def _anchor(self, width: float, height: float) -> Tuple[float, float]:
        page_width, page_height = self.config.page_size
        margin = self.config.margin
        vertical, horizontal = self.position.value.split("_")

        if horizontal == "left":
            x = margin
        elif horizontal == "center":
            x = (page_width - width) / 2
        else:
            x = page_width - margin - width

        if vertical == "top":
            y = page_height - margin - height
        elif vertical == "middle":
            y = (page_height - height) / 2
        else:
            y = margin
        return x, y

    def _cell_command(self, name: str, column: int, row: int, value: Any) -> None:
        self._check(column, row)
        self.commands.append((name, (column, row), (column, row), value))

    def _check(self, column: int, row: int) -> None:
        if not (0 <= column < self._columns and 0 <= row < self._rows):
            raise RenderingError(
                "Cell index out of range",
                f"({column}, {row}) outside {self._columns}x{self._rows}",
            )
