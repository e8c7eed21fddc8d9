"""Helper utilities: enumerations and logging setup."""

from .enums import FontFamily, HorizontalAlign, Position, SignalDirection, TextSize, VerticalAlign
from .logger import configure_logging, get_logger, set_log_level
from .rich_logger import create_logger, setup_logging

__all__ = [
    "FontFamily",
    "HorizontalAlign",
    "Position",
    "SignalDirection",
    "TextSize",
    "VerticalAlign",
    "configure_logging",
    "get_logger",
    "set_log_level",
    "create_logger",
    "setup_logging",
]
