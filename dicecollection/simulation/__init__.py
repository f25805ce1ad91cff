"""Histogram rendering and exact distributions for Dice Collection."""
from .chart import (
    Bar, HistogramRow, HistogramSummary,
    axis_ticks, bar_layout, format_star_chart, histogram_rows, star_count, summarize,
)
from .distribution import exact_distribution, expected_counts, total_variation

__all__ = [
    "Bar",
    "HistogramRow",
    "HistogramSummary",
    "axis_ticks",
    "bar_layout",
    "format_star_chart",
    "histogram_rows",
    "star_count",
    "summarize",
    "exact_distribution",
    "expected_counts",
    "total_variation",
]
