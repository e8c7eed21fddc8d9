"""
Rich logging for chartkit.

Provides colorful console logging using the rich library.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .logger import DEFAULT_DATE_FORMAT, DEFAULT_FORMAT, _level


def _rich_handler(console: Console) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def setup_logging(level: str = "INFO", use_rich: bool = True) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level
        use_rich: Whether to use rich logging
    """
    numeric_level = _level(level)
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if use_rich:
        root_logger.addHandler(_rich_handler(Console(stderr=True)))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(f"Logging initialized at {level} level (rich={use_rich})")


def create_logger(name: str, level: str = "INFO", console: Console = None) -> logging.Logger:
    """
    Create a logger with rich formatting.

    Args:
        name: Logger name
        level: Log level
        console: Console to write to, stderr by default

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(_level(level))
    logger.addHandler(_rich_handler(console or Console(stderr=True)))
    return logger
