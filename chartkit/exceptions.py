"""Custom exceptions for chartkit."""

from typing import Optional


class ChartkitError(Exception):
    """Base exception for chartkit errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class StyleError(ChartkitError):
    """Exception raised while reading style data."""

    pass


class RenderingError(ChartkitError):
    """Exception raised when a table widget rejects an index or value."""

    pass
