"""
Tests for TableRenderer against the in-memory grid widget.
"""

import pytest

from chartkit.builder import add_cell, add_column, add_row, create_table
from chartkit.engine.cascade_resolver import resolve_table
from chartkit.renderers.base_renderer import TableWidget
from chartkit.renderers.table_renderer import RenderStats, TableRenderer, render_table
from chartkit.styles.color import Color
from chartkit.styles.style_types import TableStyle, TextStyle
from chartkit.utils.enums import FontFamily, HorizontalAlign, Position, TextSize, VerticalAlign


WHITE = Color(255, 255, 255)


@pytest.fixture
def renderer(grid_widget):
    return TableRenderer(grid_widget)


class TestTableRenderer:
    """Test cases for TableRenderer.render."""

    def test_begin_called_with_dimensions(self, renderer, grid_widget, sample_table):
        renderer.render(sample_table)

        assert grid_widget.calls[0] == ('begin', (Position.TOP_RIGHT, 3, 3))
        assert grid_widget.style == sample_table.style

    def test_returns_widget_result(self, renderer, sample_table):
        grid = renderer.render(sample_table)

        assert len(grid) == 3
        assert all(len(row) == 3 for row in grid)

    def test_text_written(self, renderer, grid_widget, sample_table):
        renderer.render(sample_table)

        assert grid_widget.cell(0, 0)['text'] == "Name"
        assert grid_widget.cell(2, 1)['text'] == "extra"
        assert 'text' not in grid_widget.cell(1, 2)

    def test_text_color_on_every_cell(self, renderer, grid_widget, sample_table):
        renderer.render(sample_table)

        assert grid_widget.count_calls('set_cell_text_color') == 6
        assert grid_widget.cell(0, 0)['text_color'] == WHITE

    def test_background_calls_skip_table_background(self, renderer, grid_widget, sample_table, red):
        """Test only cells whose background differs from the table's get one."""
        renderer.render(sample_table)

        assert grid_widget.count_calls('set_cell_background') == 3
        assert grid_widget.cell(0, 2)['background'] == red
        assert 'background' not in grid_widget.cell(1, 1)

    def test_unset_attributes_not_applied(self, renderer, grid_widget, sample_table):
        renderer.render(sample_table)

        assert grid_widget.count_calls('set_cell_text_size') == 0
        assert grid_widget.count_calls('set_cell_valign') == 0
        assert grid_widget.count_calls('set_cell_halign') == 2

    def test_tooltip_applied(self, renderer, grid_widget, sample_table):
        renderer.render(sample_table)

        assert grid_widget.cell(1, 1)['tooltip'] == "overbought"
        assert grid_widget.count_calls('set_cell_tooltip') == 1

    def test_column_widths_and_row_heights(self, renderer, grid_widget, sample_table):
        renderer.render(sample_table)

        assert grid_widget.column_widths == {0: 20}
        assert grid_widget.row_heights == {2: 5}

    def test_all_attributes(self, renderer, grid_widget, blue):
        table = create_table("bottom_center")
        add_column(table, style=TableStyle(vertical_align="bottom"))
        row = add_row(table)
        add_cell(row, "x", width=10, height=4, style=TableStyle(
            background_color=blue,
            horizontal_align="left",
            font=TextStyle(color=WHITE, size="huge", family="monospace"),
        ))

        renderer.render(table)

        assert grid_widget.cell(0, 0) == {
            'text': "x",
            'text_color': WHITE,
            'background': blue,
            'text_size': TextSize.HUGE,
            'text_font_family': FontFamily.MONOSPACE,
            'halign': HorizontalAlign.LEFT,
            'valign': VerticalAlign.BOTTOM,
            'width': 10,
            'height': 4,
        }
        assert grid_widget.position is Position.BOTTOM_CENTER

    def test_renders_resolved_table(self, renderer, grid_widget, sample_table):
        resolved = resolve_table(sample_table)

        renderer.render(resolved)

        assert grid_widget.count_calls('set_cell_text') == 6

    def test_stats(self, renderer, sample_table):
        renderer.render(sample_table)

        assert renderer.stats.cells == 6
        assert renderer.stats.calls['set_cell_text_color'] == 6
        assert renderer.stats.calls['set_column_width'] == 1
        assert renderer.stats.to_dict()['calls']['set_cell_background'] == 3

    def test_stats_reset_between_renders(self, renderer, sample_table):
        renderer.render(sample_table)
        renderer.render(sample_table)

        assert renderer.stats.cells == 6

    def test_empty_table(self, renderer, grid_widget):
        assert renderer.render(create_table()) == []
        assert grid_widget.calls == [('begin', (Position.TOP_RIGHT, 0, 0))]

    def test_render_table_helper(self, grid_widget, sample_table):
        grid = render_table(sample_table, grid_widget)

        assert grid[0][0]['text'] == "Name"


class RecordingWidget(TableWidget):
    """Widget implementing only the abstract setters."""

    def __init__(self):
        self.calls = []

    def begin(self, position, columns, rows, style):
        self.calls.append('begin')

    def set_cell_text(self, column, row, text):
        self.calls.append('text')

    def set_cell_background(self, column, row, color):
        self.calls.append('background')

    def set_cell_text_color(self, column, row, color):
        self.calls.append('text_color')

    def set_cell_text_size(self, column, row, size):
        self.calls.append('text_size')

    def set_cell_text_font_family(self, column, row, family):
        self.calls.append('font_family')

    def set_cell_halign(self, column, row, align):
        self.calls.append('halign')

    def set_cell_valign(self, column, row, align):
        self.calls.append('valign')

    def set_cell_width(self, column, row, width):
        self.calls.append('width')

    def set_cell_height(self, column, row, height):
        self.calls.append('height')

    def set_cell_tooltip(self, column, row, tooltip):
        self.calls.append('tooltip')


class TestTableWidget:
    """Test cases for the widget base class."""

    def test_optional_hooks_default_to_no_op(self, sample_table):
        """Test widgets without column and row sizing still render."""
        widget = RecordingWidget()

        result = render_table(sample_table, widget)

        assert result is None
        assert widget.calls[0] == 'begin'
        assert widget.calls.count('text_color') == 6

    def test_abstract_methods_required(self):
        with pytest.raises(TypeError):
            TableWidget()

    def test_render_stats_defaults(self):
        stats = RenderStats()

        assert stats.to_dict() == {'cells': 0, 'calls': {}}
