"""
Style records for chart tables.

Immutable value objects with optional fields. ``None`` on any field means
"inherit from the enclosing scope", never a default.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Type, TypeVar
import logging

from ..exceptions import StyleError
from ..utils.enums import FontFamily, HorizontalAlign, TextSize, VerticalAlign
from .color import Color, parse_color
from .style_algebra import Mergeable

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="StyleRecord")
E = TypeVar("E", bound=Enum)


def _coerce_enum(enum_type: Type[E], value: Any, field_name: str) -> Optional[E]:
    if value is None or isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError as exc:
        allowed = [member.value for member in enum_type]
        raise StyleError(f"Invalid {field_name}", f"{value!r}, expected one of {allowed}") from exc


def _set(record: Any, name: str, value: Any) -> None:
    object.__setattr__(record, name, value)


class StyleRecord(Mergeable):
    """Shared serialization for style records."""

    __slots__ = ()

    # Fields holding nested style records, keyed by field name.
    _nested: ClassVar[Dict[str, Type["StyleRecord"]]] = {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain dictionary.

        Unset fields are omitted, colors become hex strings and enums their
        string values.

        Returns:
            Dictionary representation of the style
        """
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, StyleRecord):
                nested = value.to_dict()
                if nested:
                    result[f.name] = nested
            elif isinstance(value, Color):
                result[f.name] = value.to_hex(include_alpha=value.transparency > 0)
            elif isinstance(value, Enum):
                result[f.name] = value.value
            else:
                result[f.name] = value
        return result

    @classmethod
    def from_dict(cls: Type[R], data: Optional[Dict[str, Any]]) -> Optional[R]:
        """
        Load a style from a dictionary.

        Args:
            data: Dictionary produced by ``to_dict`` or written by hand

        Returns:
            The style, or None when ``data`` is None
        """
        if data is None:
            return None
        if not isinstance(data, dict):
            raise StyleError(f"{cls.__name__} data must be a dictionary", repr(data))

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise StyleError(f"Unknown {cls.__name__} fields", ", ".join(sorted(unknown)))

        values = {}
        for name, value in data.items():
            nested_type = cls._nested.get(name)
            values[name] = nested_type.from_dict(value) if nested_type else value
        style = cls(**values)
        logger.debug(f"{cls.__name__} loaded from dictionary: {style}")
        return style


@dataclass(frozen=True, slots=True)
class TextStyle(StyleRecord):
    """Text color, size and font family."""

    color: Optional[Color] = None
    size: Optional[TextSize] = None
    family: Optional[FontFamily] = None

    def __post_init__(self):
        _set(self, 'color', parse_color(self.color))
        _set(self, 'size', _coerce_enum(TextSize, self.size, 'text size'))
        _set(self, 'family', _coerce_enum(FontFamily, self.family, 'font family'))


@dataclass(frozen=True, slots=True)
class LineStyle(StyleRecord):
    """Line color and width, used for cell borders and the table frame."""

    color: Optional[Color] = None
    width: Optional[int] = None

    def __post_init__(self):
        _set(self, 'color', parse_color(self.color))
        if self.width is not None and (not isinstance(self.width, int) or self.width < 0):
            raise ValueError(f"Line width must be a non-negative int, got {self.width!r}")


@dataclass(frozen=True, slots=True)
class CellAlign(StyleRecord):
    """Nested alignment form used by older table style documents."""

    horizontal: Optional[HorizontalAlign] = None
    vertical: Optional[VerticalAlign] = None

    def __post_init__(self):
        _set(self, 'horizontal', _coerce_enum(HorizontalAlign, self.horizontal, 'horizontal align'))
        _set(self, 'vertical', _coerce_enum(VerticalAlign, self.vertical, 'vertical align'))


@dataclass(frozen=True, slots=True)
class TableStyle(StyleRecord):
    """
    Style of a table, column, row or cell.

    The same record is used at every level of the table tree; the cascade
    resolver folds the levels together.
    """

    background_color: Optional[Color] = None
    horizontal_align: Optional[HorizontalAlign] = None
    vertical_align: Optional[VerticalAlign] = None
    font: Optional[TextStyle] = None
    border: Optional[LineStyle] = None
    frame: Optional[LineStyle] = None

    _nested: ClassVar[Dict[str, Type[StyleRecord]]] = {
        'font': TextStyle,
        'border': LineStyle,
        'frame': LineStyle,
    }

    def __post_init__(self):
        _set(self, 'background_color', parse_color(self.background_color))
        _set(self, 'horizontal_align',
             _coerce_enum(HorizontalAlign, self.horizontal_align, 'horizontal align'))
        _set(self, 'vertical_align',
             _coerce_enum(VerticalAlign, self.vertical_align, 'vertical align'))

    @property
    def align(self) -> CellAlign:
        """Alignment in the nested ``CellAlign`` form."""
        return CellAlign(self.horizontal_align, self.vertical_align)

    def with_align(self, align: Optional[CellAlign]) -> "TableStyle":
        """Return a copy whose alignment fields come from ``align``."""
        align = align or CellAlign()
        return TableStyle(
            background_color=self.background_color,
            horizontal_align=align.horizontal,
            vertical_align=align.vertical,
            font=self.font,
            border=self.border,
            frame=self.frame,
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["TableStyle"]:
        """
        Load a table style from either schema revision.

        The flat form carries ``horizontal_align``/``vertical_align``; the
        nested form carries ``align: {horizontal, vertical}``. Both describe
        the same record.
        """
        if isinstance(data, dict) and 'align' in data:
            data = dict(data)
            align = CellAlign.from_dict(data.pop('align')) or CellAlign()
            if 'horizontal_align' in data or 'vertical_align' in data:
                raise StyleError("Table style mixes flat and nested alignment", repr(data))
            return super(TableStyle, cls).from_dict(data).with_align(align)
        return super(TableStyle, cls).from_dict(data)
