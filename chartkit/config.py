"""Configuration for cascade resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from .styles.color import Color


@dataclass(frozen=True)
class CascadeConfig:
    """
    Settings of the cascade resolver.

    Attributes:
        dark_foreground: Text color used on bright backgrounds.
        light_foreground: Text color used on dark backgrounds.
        neutral_foreground: Text color used when no background is resolved.
        luminosity_threshold: Luminosity above which a background is bright.
        suppress_table_background: Skip cell backgrounds equal to the table's.
    """

    dark_foreground: Color = field(default_factory=lambda: Color(0, 0, 0))
    light_foreground: Color = field(default_factory=lambda: Color(255, 255, 255))
    neutral_foreground: Color = field(default_factory=lambda: Color(120, 123, 134))
    luminosity_threshold: float = 0.5
    suppress_table_background: bool = True
