"""Replay resolved tables onto table widgets."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Optional, Union
import logging

from ..config import CascadeConfig
from ..engine.cascade_resolver import CascadeResolver, ResolvedCell, ResolvedTable
from ..models.table import Table
from .base_renderer import TableWidget

logger = logging.getLogger(__name__)


@dataclass
class RenderStats:
    """Counters of the last render pass."""

    cells: int = 0
    calls: Counter = field(default_factory=Counter)

    def to_dict(self) -> dict:
        return {'cells': self.cells, 'calls': dict(self.calls)}


class TableRenderer:
    """
    Apply a table document to a :class:`TableWidget`.

    The text color is applied to every cell; every other attribute is applied
    only when it is set.
    """

    def __init__(self, widget: TableWidget, config: Optional[CascadeConfig] = None) -> None:
        self.widget = widget
        self.resolver = CascadeResolver(config)
        self.stats = RenderStats()

    def render(self, table: Union[Table, ResolvedTable]) -> Any:
        """
        Render a table document or an already resolved table.

        Args:
            table: Table document or output of :class:`CascadeResolver`

        Returns:
            Whatever the widget's ``finish`` returns
        """
        resolved = table if isinstance(table, ResolvedTable) else self.resolver.resolve(table)
        self.stats = RenderStats()

        self.widget.begin(resolved.position, resolved.column_count, resolved.row_count,
                          resolved.style)

        for column, width in enumerate(resolved.column_widths):
            if width is not None:
                self._call('set_column_width', column, width)
        for row, height in enumerate(resolved.row_heights):
            if height is not None:
                self._call('set_row_height', row, height)

        for cell in resolved.cells:
            self._draw_cell(cell)
            self.stats.cells += 1

        logger.debug(f"Rendered {self.stats.cells} cells: {dict(self.stats.calls)}")
        return self.widget.finish()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _draw_cell(self, cell: ResolvedCell) -> None:
        c, r = cell.column, cell.row
        if cell.contents is not None:
            self._call('set_cell_text', c, r, cell.contents)
        self._call('set_cell_text_color', c, r, cell.foreground_color)
        if cell.background_color is not None:
            self._call('set_cell_background', c, r, cell.background_color)
        if cell.font_size is not None:
            self._call('set_cell_text_size', c, r, cell.font_size)
        if cell.font_family is not None:
            self._call('set_cell_text_font_family', c, r, cell.font_family)
        if cell.horizontal_align is not None:
            self._call('set_cell_halign', c, r, cell.horizontal_align)
        if cell.vertical_align is not None:
            self._call('set_cell_valign', c, r, cell.vertical_align)
        if cell.width is not None:
            self._call('set_cell_width', c, r, cell.width)
        if cell.height is not None:
            self._call('set_cell_height', c, r, cell.height)
        if cell.tooltip is not None:
            self._call('set_cell_tooltip', c, r, cell.tooltip)

    def _call(self, name: str, *args: Any) -> None:
        getattr(self.widget, name)(*args)
        self.stats.calls[name] += 1


def render_table(table: Union[Table, ResolvedTable], widget: TableWidget,
                 config: Optional[CascadeConfig] = None) -> Any:
    """Render ``table`` onto ``widget`` with a one-off :class:`TableRenderer`."""
    return TableRenderer(widget, config).render(table)
