"""
Table model for chart tables.

A table owns ordered columns and rows; a row owns an ordered list of cells.
Every node may carry an optional :class:`TableStyle`. Rows do not have to be
the same length.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from ..styles.style_types import TableStyle
from ..utils.enums import Position

logger = logging.getLogger(__name__)


@dataclass
class Column:
    """Column declaration: optional style and width."""

    style: Optional[TableStyle] = None
    width: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'style': self.style.to_dict() if self.style else None,
            'width': self.width,
        }


@dataclass
class Cell:
    """Single table cell. Width, height and tooltip apply to this cell only."""

    contents: Optional[str] = None
    style: Optional[TableStyle] = None
    width: Optional[int] = None
    height: Optional[int] = None
    tooltip: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'contents': self.contents,
            'style': self.style.to_dict() if self.style else None,
            'width': self.width,
            'height': self.height,
            'tooltip': self.tooltip,
        }


@dataclass
class Row:
    """Table row holding cells in column order."""

    cells: List[Optional[Cell]] = field(default_factory=list)
    style: Optional[TableStyle] = None
    height: Optional[int] = None

    def add_cell(self, contents: Optional[str] = None, style: Optional[TableStyle] = None,
                 width: Optional[int] = None, height: Optional[int] = None,
                 tooltip: Optional[str] = None) -> Cell:
        """Append a cell and return it."""
        cell = Cell(contents=contents, style=style, width=width, height=height, tooltip=tooltip)
        self.cells.append(cell)
        logger.debug(f"Added cell to row. Total cells: {len(self.cells)}")
        return cell

    def cell(self, column: int) -> Optional[Cell]:
        """Cell at ``column``, or None when the slot is absent."""
        if 0 <= column < len(self.cells):
            return self.cells[column]
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'cells': [cell.to_dict() if cell else None for cell in self.cells],
            'style': self.style.to_dict() if self.style else None,
            'height': self.height,
        }


@dataclass
class Table:
    """
    Declarative table document.

    Built once, handed to the cascade resolver, then discarded.
    """

    position: Position = Position.TOP_RIGHT
    columns: List[Column] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)
    style: Optional[TableStyle] = None

    def __post_init__(self):
        self.position = Position(self.position)

    def add_column(self, width: Optional[int] = None, style: Optional[TableStyle] = None) -> Column:
        """Append a column declaration and return it."""
        column = Column(style=style, width=width)
        self.columns.append(column)
        logger.debug(f"Added column to table. Total columns: {len(self.columns)}")
        return column

    def add_row(self, cells: Optional[List[Cell]] = None, style: Optional[TableStyle] = None,
                height: Optional[int] = None) -> Row:
        """Append a row, optionally pre-populated with cells, and return it."""
        row = Row(cells=list(cells) if cells else [], style=style, height=height)
        self.rows.append(row)
        logger.debug(f"Added row to table. Total rows: {len(self.rows)}")
        return row

    @property
    def column_count(self) -> int:
        """Rendered column count: declared columns or the widest row."""
        widest = max((len(row.cells) for row in self.rows), default=0)
        return max(len(self.columns), widest)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column(self, index: int) -> Optional[Column]:
        if 0 <= index < len(self.columns):
            return self.columns[index]
        return None

    def cell(self, row: int, column: int) -> Optional[Cell]:
        """Cell at (``row``, ``column``), or None when the slot is absent."""
        if 0 <= row < len(self.rows):
            return self.rows[row].cell(column)
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'position': self.position.value,
            'style': self.style.to_dict() if self.style else None,
            'columns': [column.to_dict() for column in self.columns],
            'rows': [row.to_dict() for row in self.rows],
        }
