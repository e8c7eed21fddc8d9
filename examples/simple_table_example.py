#!/usr/bin/env python3
"""
Example of the chartkit table API.

Builds a signal report, resolves it and draws it into a PDF page.
"""

from pathlib import Path

from reportlab.pdfgen.canvas import Canvas

from chartkit import (
    Color,
    GridWidget,
    LineStyle,
    PdfTableWidget,
    SignalAggregator,
    TableRenderer,
    TableStyle,
    render_table,
)
from chartkit.utils.rich_logger import setup_logging


def main():
    """Build, render and save a signal table."""

    # 1. Collect signals
    print("📈 Collecting signals...")
    aggregator = SignalAggregator()
    aggregator.add("RSI(14)", "bullish", 64.3)
    aggregator.add("MACD", "bearish", -0.42)
    aggregator.add("SMA 50/200", "bullish", weight=2.0)
    aggregator.add("Volume", "neutral", 1.07)
    print(f"   Score: {aggregator.score():.2f}, consensus: {aggregator.consensus().value}")

    # 2. Build the table document
    table = aggregator.build_table(
        "top_right",
        TableStyle(
            background_color=Color(19, 23, 34),
            frame=LineStyle(color=Color(42, 46, 57), width=1),
            border=LineStyle(color=Color(42, 46, 57), width=1),
        ),
    )
    print(f"   Table: {table.column_count}x{table.row_count}")

    # 3. Render in memory
    grid_widget = GridWidget()
    renderer = TableRenderer(grid_widget)
    renderer.render(table)
    print(f"   Widget calls: {renderer.stats.to_dict()['calls']}")

    # 4. Render to PDF
    print("📄 Rendering to PDF...")
    pdf_path = Path("output/simple_table_example.pdf")
    canvas = Canvas(str(pdf_path))
    render_table(table, PdfTableWidget(canvas))
    canvas.save()
    print(f"   ✅ PDF saved: {pdf_path}")

    print("\n✅ Done!")


if __name__ == "__main__":
    Path("output").mkdir(exist_ok=True)
    setup_logging("INFO")
    main()
