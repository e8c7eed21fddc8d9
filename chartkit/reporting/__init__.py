"""Signal aggregation reports."""

from .signal_report import Signal, SignalAggregator, SignalReportConfig

__all__ = ["Signal", "SignalAggregator", "SignalReportConfig"]
