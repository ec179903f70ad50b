"""
Anchor calibration: bend a concentration curve so that a chosen population
share maps to a chosen magnitude share, keeping (100, 100) pinned and the
curve non-decreasing.

Two strategies satisfy the same contract:

piecewise
    Rescale an empirical curve around the point nearest the anchor,
    k = round(n * anchor / 100) kept below n. Points below k are scaled by
    target / c, points from k on are mapped affinely from [c, 100] onto
    [target, 100], where c is the raw share at point k-1.

parametric
    Fit f(p) = expm1(beta p) / expm1(beta) by bisection on beta and sample
    it on an even grid. f decreases in beta for fixed p, so an undershoot
    means beta is too large.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from revenue_story.curves.errors import CalibrationConvergenceWarning, DegenerateDistributionError
from revenue_story.curves.models import AnchorConstraint
from revenue_story.utils.logging_utils import warn

PIECEWISE = "piecewise"
PARAMETRIC = "parametric"
STRATEGIES = (PIECEWISE, PARAMETRIC)

# smallest usable denominator, in percentage points
DENOMINATOR_EPS = 1e-9


@dataclass(frozen=True)
class ParametricParams:
    beta_min: float = 0.01
    beta_max: float = 6.0
    max_iterations: int = 40
    tolerance_pct: float = 1e-4
    sample_points: int = 100


@dataclass(frozen=True)
class Calibration:
    population: np.ndarray
    share: np.ndarray
    strategy: str
    share_at_anchor_pct: float
    # population share the anchor was matched at (the nearest point for piecewise)
    anchor_population_pct: float
    raw_share_at_anchor_pct: Optional[float] = None
    beta: Optional[float] = None
    iterations: int = 0
    converged: bool = True


# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------

def anchor_index(count: int, population_share_pct: float) -> int:
    """
    1-based index of the interior point nearest the anchor, 0 if there is none.

    Point i sits at i / count * 100, so the nearest one is the rounded
    position. The last point is pinned to (100, 100) and never eligible.
    """
    n = int(count)
    k = int(math.floor(n * float(population_share_pct) / 100.0 + 0.5))
    return max(0, min(k, n - 1))


def share_at(population, share, population_share_pct: float) -> float:
    """Linear interpolation on the curve with an implicit (0, 0) origin."""
    x = np.concatenate(([0.0], np.asarray(population, dtype=np.float64)))
    y = np.concatenate(([0.0], np.asarray(share, dtype=np.float64)))
    return float(np.interp(float(population_share_pct), x, y))


def _pin_and_clean(share: np.ndarray) -> np.ndarray:
    out = np.clip(share, 0.0, 100.0)
    # float noise from the affine map must not create a dip
    out = np.maximum.accumulate(out)
    out[-1] = 100.0
    return out


# ------------------------------------------------------------
# Piecewise rescale
# ------------------------------------------------------------

def piecewise_rescale(population, share, anchor: AnchorConstraint) -> Calibration:
    population = np.asarray(population, dtype=np.float64)
    share = np.asarray(share, dtype=np.float64)
    n = int(share.size)
    target = float(anchor.target_magnitude_share_pct)

    k = anchor_index(n, anchor.population_share_pct)
    if k == 0:
        warn(
            f"No interior point near {anchor.population_share_pct}% among {n} customer(s); "
            "anchor calibration skipped"
        )
        return Calibration(
            population=population,
            share=share.copy(),
            strategy=PIECEWISE,
            share_at_anchor_pct=share_at(population, share, anchor.population_share_pct),
            anchor_population_pct=float(anchor.population_share_pct),
            raw_share_at_anchor_pct=None,
        )

    current = float(share[k - 1])
    low_den = max(current, DENOMINATOR_EPS)
    high_den = max(100.0 - current, DENOMINATOR_EPS)
    if low_den != current or high_den != 100.0 - current:
        raise DegenerateDistributionError(
            f"Raw share at the anchor is {current!r}%; rescaling to {target}% would divide by ~0"
        )

    factor_low = target / low_den
    factor_high = (100.0 - target) / high_den

    adjusted = np.empty_like(share)
    adjusted[:k] = np.clip(share[:k] * factor_low, 0.0, target)
    adjusted[k:] = np.clip(target + (share[k:] - current) * factor_high, target, 100.0)
    # c * (target / c) can land one ulp off target
    adjusted[k - 1] = target
    adjusted = _pin_and_clean(adjusted)

    return Calibration(
        population=population,
        share=adjusted,
        strategy=PIECEWISE,
        share_at_anchor_pct=float(adjusted[k - 1]),
        anchor_population_pct=float(population[k - 1]),
        raw_share_at_anchor_pct=current,
    )


# ------------------------------------------------------------
# Parametric family
# ------------------------------------------------------------

def exp_curve(p, beta: float):
    """f(p) = (e^{beta p} - 1) / (e^{beta} - 1) on p in [0, 1]."""
    return np.expm1(beta * np.asarray(p, dtype=np.float64)) / math.expm1(beta)


def solve_beta(anchor: AnchorConstraint, params: ParametricParams = ParametricParams()) -> Tuple[float, int, bool]:
    """
    Bisection for beta such that f(anchor) == target.

    Returns (beta, iterations, converged). When the target is out of reach the
    closest beta seen is returned with converged=False.
    """
    p = float(anchor.population_share_pct) / 100.0
    target = float(anchor.target_magnitude_share_pct) / 100.0
    tol = float(params.tolerance_pct) / 100.0

    lo, hi = float(params.beta_min), float(params.beta_max)
    best_beta, best_err = lo, math.inf
    iterations = 0

    for iterations in range(1, int(params.max_iterations) + 1):
        mid = 0.5 * (lo + hi)
        value = float(exp_curve(p, mid))
        err = abs(value - target)
        if err < best_err:
            best_beta, best_err = mid, err
        if err <= tol:
            break
        if value < target:
            hi = mid
        else:
            lo = mid

    return best_beta, iterations, best_err <= tol


def parametric_curve(anchor: AnchorConstraint, params: ParametricParams = ParametricParams()) -> Calibration:
    beta, iterations, converged = solve_beta(anchor, params)

    if not converged:
        msg = (
            f"Bisection did not reach {anchor.target_magnitude_share_pct}% at "
            f"{anchor.population_share_pct}% within {iterations} iterations; "
            f"using closest beta={beta:.6f}"
        )
        warn(msg)
        warnings.warn(msg, CalibrationConvergenceWarning, stacklevel=2)

    n = int(params.sample_points)
    p = np.arange(1, n + 1, dtype=np.float64) / n
    population = p * 100.0
    population[-1] = 100.0
    share = _pin_and_clean(exp_curve(p, beta) * 100.0)

    return Calibration(
        population=population,
        share=share,
        strategy=PARAMETRIC,
        share_at_anchor_pct=share_at(population, share, anchor.population_share_pct),
        anchor_population_pct=float(anchor.population_share_pct),
        beta=beta,
        iterations=iterations,
        converged=converged,
    )
