"""
Tests for the cascade resolver.
"""

import pytest

from chartkit.builder import add_cell, add_column, add_row, create_table
from chartkit.config import CascadeConfig
from chartkit.engine.cascade_resolver import CascadeResolver, resolve_table
from chartkit.models.table import Cell
from chartkit.styles.color import Color
from chartkit.styles.style_types import LineStyle, TableStyle, TextStyle
from chartkit.utils.enums import FontFamily, HorizontalAlign, TextSize, VerticalAlign


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
NEUTRAL = Color(120, 123, 134)


@pytest.fixture
def resolver():
    return CascadeResolver()


class TestEffectiveStyle:
    """Test cases for the four-level fold."""

    def test_cell_beats_row_beats_column_beats_table(self, blue, red, green):
        table_style = TableStyle(background_color=blue, vertical_align="top")
        column_style = TableStyle(background_color=red, horizontal_align="left")
        row_style = TableStyle(horizontal_align="right", font=TextStyle(size="small"))
        cell_style = TableStyle(background_color=green)

        style = CascadeResolver.effective_style(table_style, column_style, row_style, cell_style)

        assert style.background_color == green
        assert style.horizontal_align is HorizontalAlign.RIGHT
        assert style.vertical_align is VerticalAlign.TOP
        assert style.font.size is TextSize.SMALL

    def test_all_unset(self):
        assert CascadeResolver.effective_style(None, None, None, None) is None

    def test_nested_fields_fold_independently(self):
        table_style = TableStyle(font=TextStyle(color=BLACK, family="monospace"))
        cell_style = TableStyle(font=TextStyle(size="huge"))

        style = CascadeResolver.effective_style(table_style, None, None, cell_style)

        assert style.font == TextStyle(color=BLACK, size=TextSize.HUGE, family=FontFamily.MONOSPACE)


class TestResolve:
    """Test cases for CascadeResolver.resolve."""

    def test_dimensions(self, resolver, sample_table):
        resolved = resolver.resolve(sample_table)

        assert resolved.column_count == 3
        assert resolved.row_count == 3
        assert len(resolved.cells) == 6

    def test_cells_in_row_major_order(self, resolver, sample_table):
        resolved = resolver.resolve(sample_table)

        assert [(c.row, c.column) for c in resolved.cells] == [
            (0, 0), (0, 1), (1, 0), (1, 1), (1, 2), (2, 0),
        ]

    def test_column_beats_table(self, resolver, sample_table, red):
        """Test a column background overrides the table background."""
        resolved = resolver.resolve(sample_table)

        assert resolved.cell(1, 0).background_color == red
        assert resolved.cell(1, 0).effective_style.background_color == red

    def test_cell_beats_everything(self, resolver, sample_table, green):
        sample_table.cell(1, 0).style = TableStyle(background_color=green)

        resolved = resolver.resolve(sample_table)

        assert resolved.cell(1, 0).background_color == green

    def test_table_background_suppressed(self, resolver, sample_table, blue):
        """Test cells that only inherit the table background get no background call."""
        resolved = resolver.resolve(sample_table)

        assert resolved.cell(0, 1).background_color is None
        assert resolved.cell(1, 2).background_color is None
        assert resolved.cell(1, 2).effective_style.background_color == blue
        assert sum(1 for c in resolved.cells if c.background_color is not None) == 3

    def test_suppression_can_be_disabled(self, sample_table, blue):
        resolved = resolve_table(sample_table, CascadeConfig(suppress_table_background=False))

        assert resolved.cell(0, 1).background_color == blue
        assert all(c.background_color is not None for c in resolved.cells)

    def test_row_style_applies(self, resolver, sample_table):
        resolved = resolver.resolve(sample_table)

        assert resolved.cell(0, 0).horizontal_align is HorizontalAlign.CENTER
        assert resolved.cell(0, 1).horizontal_align is HorizontalAlign.CENTER
        assert resolved.cell(1, 0).horizontal_align is None

    def test_cell_attributes_passed_through(self, resolver, sample_table):
        resolved = resolver.resolve(sample_table)

        cell = resolved.cell(1, 1)
        assert cell.contents == "71.2"
        assert cell.tooltip == "overbought"
        assert cell.width is None

    def test_widths_and_heights(self, resolver, sample_table):
        resolved = resolver.resolve(sample_table)

        assert resolved.column_widths == [20, None, None]
        assert resolved.row_heights == [None, None, 5]

    def test_missing_cells_skipped(self, resolver):
        table = create_table()
        add_row(table, cells=[Cell("a"), None, Cell("c")])

        resolved = resolver.resolve(table)

        assert resolved.column_count == 3
        assert [c.column for c in resolved.cells] == [0, 2]
        assert resolved.cell(0, 1) is None

    def test_ragged_rows(self, resolver):
        """Test rows of 2, 3 and 1 cells resolve to a three-column table."""
        table = create_table()
        for size in (2, 3, 1):
            row = add_row(table)
            for index in range(size):
                add_cell(row, str(index))

        resolved = resolver.resolve(table)

        assert resolved.column_count == 3
        assert len(resolved.cells) == 6

    def test_empty_table(self, resolver):
        resolved = resolver.resolve(create_table())

        assert resolved.column_count == 0
        assert resolved.cells == []

    def test_table_not_mutated(self, resolver, sample_table):
        before = sample_table.to_dict()

        resolver.resolve(sample_table)

        assert sample_table.to_dict() == before


class TestForeground:
    """Test cases for the foreground color."""

    def test_explicit_font_color_wins(self, resolver, blue):
        table = create_table(style=TableStyle(background_color=WHITE))
        add_cell(add_row(table), "x", style=TableStyle(font=TextStyle(color=blue)))

        assert resolver.resolve(table).cell(0, 0).foreground_color == blue

    def test_bright_background_gets_dark_text(self, resolver):
        table = create_table()
        add_cell(add_row(table), "x", style=TableStyle(background_color=Color(230, 230, 230)))

        assert resolver.resolve(table).cell(0, 0).foreground_color == BLACK

    def test_dark_background_gets_light_text(self, resolver):
        table = create_table()
        add_cell(add_row(table), "x", style=TableStyle(background_color=Color(25, 25, 25)))

        assert resolver.resolve(table).cell(0, 0).foreground_color == WHITE

    def test_no_background_gets_neutral_text(self, resolver):
        table = create_table()
        add_cell(add_row(table), "x")

        cell = resolver.resolve(table).cell(0, 0)

        assert cell.foreground_color == NEUTRAL
        assert cell.background_color is None

    def test_contrast_uses_suppressed_background(self, resolver):
        """Test contrast is computed before the table background is dropped."""
        table = create_table(style=TableStyle(background_color=WHITE))
        add_cell(add_row(table), "x")

        cell = resolver.resolve(table).cell(0, 0)

        assert cell.background_color is None
        assert cell.foreground_color == BLACK

    def test_custom_foregrounds(self):
        config = CascadeConfig(neutral_foreground=Color(1, 1, 1))
        table = create_table()
        add_cell(add_row(table), "x")

        assert resolve_table(table, config).cell(0, 0).foreground_color == Color(1, 1, 1)

    def test_font_size_and_family(self, resolver):
        table = create_table(style=TableStyle(font=TextStyle(family="monospace"),
                                              frame=LineStyle(width=1)))
        add_column(table, style=TableStyle(font=TextStyle(size="large")))
        add_cell(add_row(table), "x")

        cell = resolver.resolve(table).cell(0, 0)

        assert cell.font_size is TextSize.LARGE
        assert cell.font_family is FontFamily.MONOSPACE
