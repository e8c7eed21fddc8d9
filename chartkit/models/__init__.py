"""Table document model."""

from .table import Cell, Column, Row, Table

__all__ = ["Cell", "Column", "Row", "Table"]
