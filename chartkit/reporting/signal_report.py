"""
Signal aggregation for chart reports.

Collects named trading signals, scores them and lays them out as a table
document. Drawing the table is left to whichever widget the caller renders
it with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union
import logging

from ..builder import add_cell, add_column, add_row, create_table
from ..models.table import Table
from ..styles.color import Color
from ..styles.style_types import TableStyle, TextStyle
from ..utils.enums import HorizontalAlign, Position, SignalDirection, TextSize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Signal:
    """One signal reading."""

    name: str
    direction: SignalDirection
    value: Optional[float] = None
    weight: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'direction', SignalDirection(self.direction))
        if self.weight < 0:
            raise ValueError(f"Signal weight must be non-negative, got {self.weight!r}")


@dataclass(frozen=True)
class SignalReportConfig:
    """
    Appearance and scoring of the signal report.

    Attributes:
        direction_colors: Background of the direction cell per direction.
        header_style: Style of the header row.
        consensus_threshold: Score magnitude above which consensus leaves neutral.
        value_format: Format spec applied to signal values.
    """

    direction_colors: Dict[SignalDirection, Color] = field(default_factory=lambda: {
        SignalDirection.BULLISH: Color(8, 153, 129),
        SignalDirection.BEARISH: Color(242, 54, 69),
        SignalDirection.NEUTRAL: Color(120, 123, 134),
    })
    header_style: TableStyle = field(default_factory=lambda: TableStyle(
        background_color=Color(42, 46, 57),
        horizontal_align=HorizontalAlign.CENTER,
        font=TextStyle(size=TextSize.NORMAL),
    ))
    consensus_threshold: float = 0.2
    value_format: str = ".2f"


class SignalAggregator:
    """Accumulate signals and summarize them."""

    def __init__(self, config: Optional[SignalReportConfig] = None) -> None:
        self.config = config or SignalReportConfig()
        self.signals: List[Signal] = []

    def add(self, name: str, direction: Union[SignalDirection, str],
            value: Optional[float] = None, weight: float = 1.0) -> Signal:
        """Record a signal and return it."""
        signal = Signal(name, SignalDirection(direction), value, weight)
        self.signals.append(signal)
        logger.debug(f"Signal added: {name} ({signal.direction.value})")
        return signal

    def extend(self, signals: Iterable[Signal]) -> None:
        self.signals.extend(signals)

    def clear(self) -> None:
        self.signals.clear()

    def counts(self) -> Dict[SignalDirection, int]:
        """Number of signals per direction, every direction present."""
        result = {direction: 0 for direction in SignalDirection}
        for signal in self.signals:
            result[signal.direction] += 1
        return result

    def score(self) -> float:
        """
        Weighted balance of the signals in [-1, 1].

        Bullish weight minus bearish weight, divided by the total weight.
        Returns 0.0 when there is no weight at all.
        """
        total = sum(signal.weight for signal in self.signals)
        if total == 0:
            return 0.0
        balance = 0.0
        for signal in self.signals:
            if signal.direction is SignalDirection.BULLISH:
                balance += signal.weight
            elif signal.direction is SignalDirection.BEARISH:
                balance -= signal.weight
        return balance / total

    def consensus(self) -> SignalDirection:
        score = self.score()
        threshold = self.config.consensus_threshold
        if score > threshold:
            return SignalDirection.BULLISH
        if score < -threshold:
            return SignalDirection.BEARISH
        return SignalDirection.NEUTRAL

    def build_table(self, position: Union[Position, str] = Position.TOP_RIGHT,
                    style: Optional[TableStyle] = None) -> Table:
        """
        Lay the signals out as a three-column table document.

        Columns are name, direction and value. The last row carries the
        consensus and score.

        Args:
            position: Anchor of the table
            style: Table-level style

        Returns:
            Table document ready for a renderer
        """
        config = self.config
        table = create_table(position, style)
        add_column(table, style=TableStyle(horizontal_align=HorizontalAlign.LEFT))
        add_column(table, style=TableStyle(horizontal_align=HorizontalAlign.CENTER))
        add_column(table, style=TableStyle(horizontal_align=HorizontalAlign.RIGHT))

        header = add_row(table, style=config.header_style)
        for title in ("Signal", "Direction", "Value"):
            add_cell(header, title)

        for signal in self.signals:
            row = add_row(table)
            add_cell(row, signal.name)
            add_cell(row, signal.direction.value,
                     style=TableStyle(background_color=config.direction_colors[signal.direction]))
            if signal.value is not None:
                add_cell(row, format(signal.value, config.value_format))

        consensus = self.consensus()
        summary = add_row(table, style=TableStyle(font=TextStyle(size=TextSize.NORMAL)))
        add_cell(summary, "Consensus")
        add_cell(summary, consensus.value,
                 style=TableStyle(background_color=config.direction_colors[consensus]))
        add_cell(summary, format(self.score(), config.value_format))

        logger.debug(f"Signal table built: {len(self.signals)} signals, consensus {consensus.value}")
        return table
