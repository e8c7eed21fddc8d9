"""Common enumerations used across the table models and widgets."""

from __future__ import annotations

from enum import Enum


class Position(str, Enum):
    """Anchor of a table on the chart pane."""

    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    MIDDLE_LEFT = "middle_left"
    MIDDLE_CENTER = "middle_center"
    MIDDLE_RIGHT = "middle_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"


class TextSize(str, Enum):
    """Text sizes understood by the host table widget."""

    AUTO = "auto"
    TINY = "tiny"
    SMALL = "small"
    NORMAL = "normal"
    LARGE = "large"
    HUGE = "huge"


class HorizontalAlign(str, Enum):
    """Horizontal text alignment inside a cell."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlign(str, Enum):
    """Vertical text alignment inside a cell."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class FontFamily(str, Enum):
    """Font families available to cell text."""

    DEFAULT = "default"
    MONOSPACE = "monospace"


class SignalDirection(str, Enum):
    """Direction a trading signal points in."""

    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"
