"""
Append-only construction of table documents.

Each function returns the node it created so the caller can keep adjusting it
before the table is resolved. Nothing here checks that rows line up.
"""

from __future__ import annotations

from typing import List, Optional, Union

from .models.table import Cell, Column, Row, Table
from .styles.style_types import TableStyle
from .utils.enums import Position


def create_table(position: Union[Position, str] = Position.TOP_RIGHT,
                 style: Optional[TableStyle] = None) -> Table:
    """
    Create an empty table.

    Args:
        position: Anchor of the table on the chart pane
        style: Table-level style, the lowest precedence in the cascade

    Returns:
        New table with no columns or rows
    """
    return Table(position=Position(position), style=style)


def add_column(table: Table, width: Optional[int] = None,
               style: Optional[TableStyle] = None) -> Column:
    return table.add_column(width=width, style=style)


def add_row(table: Table, cells: Optional[List[Cell]] = None,
            style: Optional[TableStyle] = None, height: Optional[int] = None) -> Row:
    return table.add_row(cells=cells, style=style, height=height)


def add_cell(row: Row, contents: Optional[str] = None, style: Optional[TableStyle] = None,
             width: Optional[int] = None, height: Optional[int] = None,
             tooltip: Optional[str] = None) -> Cell:
    return row.add_cell(contents=contents, style=style, width=width, height=height, tooltip=tooltip)
