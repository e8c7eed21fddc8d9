"""
Color values for chart tables.

Handles color parsing, na-aware color equality, luminosity and the
contrasting-foreground choice used when a cell declares no text color.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
import logging

from ..exceptions import StyleError

logger = logging.getLogger(__name__)


# Named palette of the charting platform.
NAMED_COLORS: Dict[str, Tuple[int, int, int]] = {
    'black': (54, 58, 69),
    'white': (255, 255, 255),
    'gray': (120, 123, 134),
    'silver': (178, 181, 190),
    'red': (242, 54, 69),
    'maroon': (136, 14, 79),
    'green': (76, 175, 80),
    'lime': (0, 230, 118),
    'olive': (128, 128, 0),
    'teal': (0, 137, 123),
    'blue': (33, 150, 243),
    'navy': (49, 27, 146),
    'aqua': (0, 188, 212),
    'fuchsia': (224, 64, 251),
    'purple': (156, 39, 176),
    'orange': (255, 152, 0),
    'yellow': (255, 235, 59),
}


@dataclass(frozen=True, slots=True)
class Color:
    """
    RGBA color.

    ``transparency`` follows the platform convention: 0 is fully opaque,
    100 is invisible.
    """

    r: int
    g: int
    b: int
    transparency: int = 0

    def __post_init__(self):
        """Reject components outside the platform ranges."""
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"Color component {name} must be an int in [0, 255], got {value!r}")
        if not isinstance(self.transparency, int) or not 0 <= self.transparency <= 100:
            raise ValueError(f"Transparency must be an int in [0, 100], got {self.transparency!r}")

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """
        Build a color from ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA``.

        Args:
            hex_color: Hex color string, leading ``#`` optional

        Returns:
            Parsed color
        """
        digits = hex_color.strip().lstrip('#')
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        if len(digits) not in (6, 8):
            raise StyleError("Invalid hex color", hex_color)
        try:
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
            alpha = int(digits[6:8], 16) if len(digits) == 8 else 255
        except ValueError as exc:
            raise StyleError("Invalid hex color", hex_color) from exc
        transparency = round((255 - alpha) * 100 / 255)
        return cls(r, g, b, transparency)

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Build a color from the platform's named palette."""
        rgb = NAMED_COLORS.get(name.strip().lower())
        if rgb is None:
            raise StyleError("Unknown color name", name)
        return cls(*rgb)

    def to_hex(self, include_alpha: bool = False) -> str:
        """Convert to ``#RRGGBB`` (or ``#RRGGBBAA`` with ``include_alpha``)."""
        text = f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        if include_alpha:
            text += f"{self.alpha:02X}"
        return text

    @property
    def alpha(self) -> int:
        """Opacity in [0, 255]."""
        return round((100 - self.transparency) * 255 / 100)

    @property
    def luminosity(self) -> float:
        return luminosity(self)

    def with_transparency(self, transparency: int) -> "Color":
        return Color(self.r, self.g, self.b, transparency)

    def to_dict(self) -> Dict[str, int]:
        return {'r': self.r, 'g': self.g, 'b': self.b, 'transparency': self.transparency}


def parse_color(value: Any) -> Optional[Color]:
    """
    Coerce a loose color value to :class:`Color`.

    Accepts ``None`` (unset), a :class:`Color`, a hex string, a palette name,
    an ``(r, g, b)`` / ``(r, g, b, transparency)`` tuple or a dict with
    ``r``/``g``/``b`` keys.

    Args:
        value: Color value to parse

    Returns:
        Parsed color, or None when the value is unset
    """
    if value is None or isinstance(value, Color):
        return value

    if isinstance(value, str):
        if value.strip().startswith('#'):
            return Color.from_hex(value)
        return Color.from_name(value)

    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        return Color(*(int(c) for c in value))

    if isinstance(value, dict) and {'r', 'g', 'b'} <= value.keys():
        return Color(int(value['r']), int(value['g']), int(value['b']),
                     int(value.get('transparency', 0)))

    raise StyleError("Unsupported color value", repr(value))


def color_equals(a: Optional[Color], b: Optional[Color]) -> bool:
    """Na-aware equality: unset equals unset, unset never equals a color."""
    if a is None or b is None:
        return a is None and b is None
    return a == b


def luminosity(color: Color) -> float:
    """Weighted brightness of ``color`` in [0, 1]."""
    return (0.299 * color.r + 0.587 * color.g + 0.114 * color.b) / 255


def contrast_color(background: Optional[Color],
                   dark: Color,
                   light: Color,
                   neutral: Color,
                   threshold: float = 0.5) -> Color:
    """
    Pick a readable text color for ``background``.

    Args:
        background: Resolved background, or None when unset
        dark: Foreground used on bright backgrounds
        light: Foreground used on dark backgrounds
        neutral: Foreground used when no background is known
        threshold: Luminosity above which the background counts as bright

    Returns:
        The chosen foreground color
    """
    if background is None:
        return neutral
    return dark if luminosity(background) > threshold else light
