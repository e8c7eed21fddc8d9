"""
Pytest configuration for chartkit
"""

import pytest
import logging
import sys

from chartkit.builder import add_cell, add_column, add_row, create_table
from chartkit.renderers.grid_widget import GridWidget
from chartkit.styles.color import Color
from chartkit.styles.style_types import TableStyle


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Only show warnings and errors during tests
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def blue():
    return Color(0, 0, 255)


@pytest.fixture
def red():
    return Color(255, 0, 0)


@pytest.fixture
def green():
    return Color(0, 128, 0)


@pytest.fixture
def grid_widget():
    """Create an empty in-memory widget."""
    return GridWidget()


@pytest.fixture
def sample_table(blue, red):
    """Two declared columns, a header row and two ragged data rows."""
    table = create_table("top_right", TableStyle(background_color=blue))
    add_column(table, width=20, style=TableStyle(background_color=red))
    add_column(table)

    header = add_row(table, style=TableStyle(horizontal_align="center"))
    add_cell(header, "Name")
    add_cell(header, "Value")

    row = add_row(table)
    add_cell(row, "RSI")
    add_cell(row, "71.2", tooltip="overbought")
    add_cell(row, "extra")

    short = add_row(table, height=5)
    add_cell(short, "MACD")
    return table


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to every test that has no other marker."""
    for item in items:
        if "unit" not in item.keywords and "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
