"""Scaling helpers that turn a histogram into star rows or bar geometry."""
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from ..core.errors import InvalidConfiguration


@dataclass
class HistogramRow:
    """One non-empty row of a star chart."""
    sum_value: int
    count: int
    stars: int

    @property
    def bar(self) -> str:
        return "*" * self.stars


@dataclass
class Bar:
    """Geometry of one bar in a drawn chart, relative to the chart origin."""
    sum_value: int
    count: int
    x: float
    width: float
    height: float


@dataclass
class HistogramSummary:
    """Statistics of a histogram."""
    trials: int
    mean: float
    std_deviation: float
    most_common_sum: int
    lowest_sum: int
    highest_sum: int

    def __str__(self) -> str:
        return (
            f"Histogram Summary ({self.trials} rolls):\n"
            f"  Mean Sum: {self.mean:.2f}\n"
            f"  Std Deviation: {self.std_deviation:.2f}\n"
            f"  Most Common Sum: {self.most_common_sum}\n"
            f"  Observed Range: {self.lowest_sum}-{self.highest_sum}"
        )


def star_count(count: int, unit: int) -> int:
    """Number of whole stars for a count, one star per ``unit``."""
    if unit < 1:
        raise InvalidConfiguration(f"Star unit must be at least 1, got {unit}")
    return int(count) // unit


def histogram_rows(tracker: Sequence[int], unit: int) -> List[HistogramRow]:
    """Rows for every sum that was rolled at least once."""
    return [
        HistogramRow(sum_value=i + 1, count=int(count), stars=star_count(count, unit))
        for i, count in enumerate(tracker)
        if count > 0
    ]


def format_star_chart(tracker: Sequence[int], unit: int) -> List[str]:
    """Plain text chart lines: padded sum, padded count, then the stars.

    Sums are padded to the width of the largest possible sum and counts to
    the width of the largest count so the star columns line up.
    """
    if len(tracker) == 0:
        return []
    sum_width = len(str(len(tracker)))
    count_width = len(str(int(max(tracker))))
    return [
        f"{row.sum_value:>{sum_width}}: {row.count:>{count_width}}\t{row.bar}"
        for row in histogram_rows(tracker, unit)
    ]


def axis_ticks(tracker: Sequence[int], ticks: int = 10) -> List[int]:
    """Y axis labels from 0 to the tallest count in ``ticks`` equal steps."""
    highest = int(max(tracker)) if len(tracker) else 0
    return [i * highest // ticks for i in range(ticks + 1)]


def bar_layout(
    tracker: Sequence[int],
    chart_width: float,
    chart_height: float,
    gap: float = 10,
) -> List[Bar]:
    """Lay out one bar per non-zero slot, scaled to the tallest count.

    Every slot owns an equal share of the width. Zero-count slots are
    dropped and the bars after them shift left to close the gap.
    """
    if len(tracker) == 0:
        return []
    highest = int(max(tracker))
    if highest == 0:
        return []

    slot_width = chart_width / len(tracker)
    bar_width = max(slot_width - gap, 1)
    bars = []
    skipped = 0
    for i, count in enumerate(tracker):
        if count == 0:
            skipped += 1
            continue
        bars.append(Bar(
            sum_value=i + 1,
            count=int(count),
            x=(i - skipped) * slot_width,
            width=bar_width,
            height=chart_height * int(count) / highest,
        ))
    return bars


def summarize(tracker: Sequence[int]) -> HistogramSummary:
    """Mean, spread and observed range of the sums recorded in a histogram."""
    counts = np.asarray(tracker, dtype=np.int64)
    trials = int(counts.sum())
    if trials == 0:
        raise InvalidConfiguration("Cannot summarize an empty histogram")

    sums = np.arange(1, len(counts) + 1)
    mean = float(np.sum(sums * counts) / trials)
    variance = float(np.sum(counts * (sums - mean) ** 2) / trials)
    rolled = np.nonzero(counts)[0]
    return HistogramSummary(
        trials=trials,
        mean=mean,
        std_deviation=variance ** 0.5,
        most_common_sum=int(np.argmax(counts)) + 1,
        lowest_sum=int(rolled[0]) + 1,
        highest_sum=int(rolled[-1]) + 1,
    )
