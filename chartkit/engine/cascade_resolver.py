"""
Cascade resolver for table documents.

Folds table → column → row → cell styles into one effective style per
occupied cell slot and extracts the attributes a table widget needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import logging

from ..config import CascadeConfig
from ..models.table import Cell, Table
from ..styles.color import Color, color_equals, contrast_color
from ..styles.style_algebra import inherit
from ..styles.style_types import TableStyle
from ..utils.enums import FontFamily, HorizontalAlign, Position, TextSize, VerticalAlign

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ResolvedCell:
    """
    Attributes of one cell after the cascade.

    ``foreground_color`` is always set; every other field may be None and is
    then left untouched on the widget.
    """

    row: int
    column: int
    foreground_color: Color
    background_color: Optional[Color] = None
    font_size: Optional[TextSize] = None
    font_family: Optional[FontFamily] = None
    horizontal_align: Optional[HorizontalAlign] = None
    vertical_align: Optional[VerticalAlign] = None
    width: Optional[int] = None
    height: Optional[int] = None
    tooltip: Optional[str] = None
    contents: Optional[str] = None
    effective_style: Optional[TableStyle] = None


@dataclass(slots=True)
class ResolvedTable:
    position: Position
    column_count: int
    row_count: int
    style: Optional[TableStyle] = None
    column_widths: List[Optional[int]] = field(default_factory=list)
    row_heights: List[Optional[int]] = field(default_factory=list)
    cells: List[ResolvedCell] = field(default_factory=list)

    def cell(self, row: int, column: int) -> Optional[ResolvedCell]:
        for resolved in self.cells:
            if resolved.row == row and resolved.column == column:
                return resolved
        return None


class CascadeResolver:
    """
    Resolve effective cell attributes for a table document.

    Precedence, highest first: cell, row, column, table. Cells missing from a
    row are skipped rather than reported.
    """

    def __init__(self, config: Optional[CascadeConfig] = None) -> None:
        self.config = config or CascadeConfig()

    def resolve(self, table: Table) -> ResolvedTable:
        """
        Resolve every occupied cell slot of ``table``.

        Args:
            table: Table document built by the caller

        Returns:
            Resolved dimensions and per-cell attributes in row-major order
        """
        column_count = table.column_count
        row_count = table.row_count
        resolved = ResolvedTable(
            position=table.position,
            column_count=column_count,
            row_count=row_count,
            style=table.style,
            column_widths=[
                column.width if column is not None else None
                for column in (table.column(c) for c in range(column_count))
            ],
            row_heights=[row.height for row in table.rows],
        )

        for r, row in enumerate(table.rows):
            for c in range(column_count):
                cell = row.cell(c)
                if cell is None:
                    continue
                column = table.column(c)
                style = self.effective_style(
                    table.style,
                    column.style if column is not None else None,
                    row.style,
                    cell.style,
                )
                resolved.cells.append(self._resolve_cell(r, c, cell, style, table.style))

        logger.debug(
            f"Resolved table {column_count}x{row_count}: {len(resolved.cells)} cells"
        )
        return resolved

    @staticmethod
    def effective_style(table_style: Optional[TableStyle],
                        column_style: Optional[TableStyle],
                        row_style: Optional[TableStyle],
                        cell_style: Optional[TableStyle]) -> Optional[TableStyle]:
        """Fold the four levels; the cell wins, then row, column and table."""
        return inherit(inherit(inherit(cell_style, row_style), column_style), table_style)

    def _resolve_cell(self, row: int, column: int, cell: Cell,
                      style: Optional[TableStyle],
                      table_style: Optional[TableStyle]) -> ResolvedCell:
        config = self.config
        style = style or TableStyle()
        font = style.font

        background = style.background_color
        foreground = font.color if font is not None else None
        if foreground is None:
            foreground = contrast_color(
                background,
                dark=config.dark_foreground,
                light=config.light_foreground,
                neutral=config.neutral_foreground,
                threshold=config.luminosity_threshold,
            )

        table_background = table_style.background_color if table_style is not None else None
        if config.suppress_table_background and color_equals(background, table_background):
            background = None

        return ResolvedCell(
            row=row,
            column=column,
            foreground_color=foreground,
            background_color=background,
            font_size=font.size if font is not None else None,
            font_family=font.family if font is not None else None,
            horizontal_align=style.horizontal_align,
            vertical_align=style.vertical_align,
            width=cell.width,
            height=cell.height,
            tooltip=cell.tooltip,
            contents=cell.contents,
            effective_style=style,
        )


def resolve_table(table: Table, config: Optional[CascadeConfig] = None) -> ResolvedTable:
    """Resolve ``table`` with a one-off :class:`CascadeResolver`."""
    return CascadeResolver(config).resolve(table)
