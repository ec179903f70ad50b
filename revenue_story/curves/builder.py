from __future__ import annotations

from typing import Tuple

import numpy as np

from revenue_story.curves.errors import DegenerateDistributionError
from revenue_story.curves.models import CurvePoint


def build_raw_curve(magnitudes) -> Tuple[np.ndarray, np.ndarray]:
    """
    Lorenz-style curve of a magnitude sample.

    Sorts ascending (stable, so equal magnitudes keep draw order), then point i
    is ((i+1)/n*100, running_sum_i/total*100). The last point is pinned to
    exactly (100, 100).

    Returns (population_share_pct, cumulative_share_pct) as float64 arrays.
    """
    mags = np.asarray(magnitudes, dtype=np.float64)
    n = int(mags.size)
    if n == 0:
        raise DegenerateDistributionError("Cannot build a concentration curve from an empty sample")

    ordered = mags[np.argsort(mags, kind="stable")]
    running = np.cumsum(ordered)
    total = float(running[-1])

    if not np.isfinite(total) or total <= 0.0:
        raise DegenerateDistributionError(
            f"Total sampled magnitude must be positive and finite (got {total!r})"
        )

    population = np.arange(1, n + 1, dtype=np.float64) / n * 100.0
    share = running / total * 100.0

    population[-1] = 100.0
    share[-1] = 100.0
    return population, share


def to_curve_points(population, share) -> Tuple[CurvePoint, ...]:
    return tuple(
        CurvePoint(float(p), float(s))
        for p, s in zip(np.asarray(population).tolist(), np.asarray(share).tolist())
    )


def gini_from_curve(population, share) -> float:
    """
    Gini coefficient of a curve given in percent: 1 - 2 * area under the curve,
    trapezoids with an implicit (0, 0) start.
    """
    x = np.concatenate(([0.0], np.asarray(population, dtype=np.float64) / 100.0))
    y = np.concatenate(([0.0], np.asarray(share, dtype=np.float64) / 100.0))
    area = float(np.sum((x[1:] - x[:-1]) * (y[1:] + y[:-1]) / 2.0))
    return 1.0 - 2.0 * area
