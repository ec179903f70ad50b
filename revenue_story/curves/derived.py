from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from revenue_story.curves.errors import ConfigurationError
from revenue_story.curves.models import HistogramBin, MonthlyPoint, ValuePathPoint
from revenue_story.utils.output_utils import format_number_short


@dataclass(frozen=True)
class MonthlyModel:
    start_value: float = 100.0
    growth_rate: float = 0.15
    rate_decay: float = 0.92


@dataclass(frozen=True)
class HistogramModel:
    start_count: int = 180
    start_magnitude: float = 50.0
    count_decay: float = 0.72
    magnitude_growth: float = 1.6


# ------------------------------------------------------------
# Monthly compounding series
# ------------------------------------------------------------

def monthly_values(months: int, model: MonthlyModel = MonthlyModel()) -> np.ndarray:
    """Per-period values with a growth rate that itself decays every period."""
    values = np.empty(int(months), dtype=np.float64)
    value = float(model.start_value)
    rate = float(model.growth_rate)
    for i in range(values.size):
        values[i] = value
        value *= 1.0 + rate
        rate *= model.rate_decay
    return values


def build_monthly(months: int, model: MonthlyModel = MonthlyModel()) -> Tuple[MonthlyPoint, ...]:
    running = np.cumsum(monthly_values(months, model))
    # normalizing by the last prefix sum makes the final period exactly 100
    share = running / running[-1] * 100.0
    return tuple(MonthlyPoint(i + 1, float(s)) for i, s in enumerate(share.tolist()))


# ------------------------------------------------------------
# Histogram
# ------------------------------------------------------------

def histogram_counts(bins: int, model: HistogramModel = HistogramModel()) -> List[int]:
    """
    Geometrically decaying counts, rounded and floored at 1.

    A rounding stall above 1 steps down by one so counts stay strictly
    decreasing; asking for more bins than fit above 1 is a config error.
    """
    counts = [int(model.start_count)]
    while len(counts) < int(bins):
        prev = counts[-1]
        if prev <= 1:
            raise ConfigurationError(
                f"histogram_bins={bins} cannot stay strictly decreasing from "
                f"start_count={model.start_count} with count_decay={model.count_decay}; "
                f"at most {len(counts)} bin(s) fit"
            )
        counts.append(_next_count(prev, model.count_decay))
    return counts


def _next_count(prev: int, decay: float) -> int:
    nxt = max(1, int(round(prev * decay)))
    return prev - 1 if nxt >= prev else nxt


def max_histogram_bins(model: HistogramModel = HistogramModel()) -> int:
    """Largest bin count `histogram_counts` accepts for this model."""
    prev, n = int(model.start_count), 1
    while prev > 1:
        prev = _next_count(prev, model.count_decay)
        n += 1
    return n


def build_histogram(bins: int, model: HistogramModel = HistogramModel()) -> Tuple[HistogramBin, ...]:
    counts = histogram_counts(bins, model)
    out = []
    threshold = float(model.start_magnitude)
    for c in counts:
        out.append(HistogramBin(format_number_short(threshold), int(c)))
        threshold *= model.magnitude_growth
    return tuple(out)


# ------------------------------------------------------------
# Value path (calibrated curve sampled by customer coverage)
# ------------------------------------------------------------

def value_path_step(count: int) -> int:
    return max(4, int(count) // 13)


def build_value_path(population, share, count: int) -> Tuple[ValuePathPoint, ...]:
    """
    Sample the calibrated curve every `value_path_step(count)` customers.

    `population`/`share` may come from a grid of a different length than
    `count` (parametric strategy), so samples are interpolated by coverage.
    """
    n = int(count)
    step = value_path_step(n)
    x = np.concatenate(([0.0], np.asarray(population, dtype=np.float64)))
    y = np.concatenate(([0.0], np.asarray(share, dtype=np.float64)))

    out = []
    for i in range(step, n + 1, step):
        pct = i / n * 100.0
        out.append(ValuePathPoint(len(out) + 1, float(pct), float(np.interp(pct, x, y))))
    return tuple(out)
