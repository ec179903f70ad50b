"""
Plain records produced by one generation run.

Every record is frozen and holds only floats, ints, strings and tuples, so a
GenerationResult can be compared for bit-identity and dumped with json as-is.
`to_dict()` uses the camelCase field names the chart layer consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class CurvePoint:
    population_share_pct: float
    cumulative_magnitude_share_pct: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "populationSharePct": self.population_share_pct,
            "cumulativeMagnitudeSharePct": self.cumulative_magnitude_share_pct,
        }


@dataclass(frozen=True)
class AnchorConstraint:
    population_share_pct: float
    target_magnitude_share_pct: float


@dataclass(frozen=True)
class AnchorSummary:
    population_share_pct: float
    magnitude_share_pct: float

    @property
    def remainder_share_pct(self) -> float:
        return 100.0 - self.magnitude_share_pct

    def to_dict(self) -> Dict[str, float]:
        return {
            "populationSharePct": self.population_share_pct,
            "magnitudeSharePct": self.magnitude_share_pct,
            "remainderSharePct": self.remainder_share_pct,
        }


@dataclass(frozen=True)
class MonthlyPoint:
    period_index: int
    cumulative_share_pct: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "periodIndex": self.period_index,
            "cumulativeSharePct": self.cumulative_share_pct,
        }


@dataclass(frozen=True)
class HistogramBin:
    bucket_label: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"bucketLabel": self.bucket_label, "count": self.count}


@dataclass(frozen=True)
class ValuePathPoint:
    step_index: int
    population_share_pct: float
    cumulative_magnitude_share_pct: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stepIndex": self.step_index,
            "populationSharePct": self.population_share_pct,
            "cumulativeMagnitudeSharePct": self.cumulative_magnitude_share_pct,
        }


@dataclass(frozen=True)
class CalibrationDiagnostics:
    strategy: str
    calibrated_share_at_anchor_pct: float
    converged: bool = True
    raw_share_at_anchor_pct: Optional[float] = None   # piecewise only
    beta: Optional[float] = None                      # parametric only
    iterations: int = 0
    gini: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy,
            "rawShareAtAnchorPct": self.raw_share_at_anchor_pct,
            "calibratedShareAtAnchorPct": self.calibrated_share_at_anchor_pct,
            "beta": self.beta,
            "iterations": self.iterations,
            "converged": self.converged,
            "gini": self.gini,
        }


@dataclass(frozen=True)
class GenerationResult:
    curve: Tuple[CurvePoint, ...]
    anchor_summary: AnchorSummary
    monthly: Tuple[MonthlyPoint, ...]
    histogram: Tuple[HistogramBin, ...]
    value_path: Tuple[ValuePathPoint, ...] = ()
    diagnostics: Optional[CalibrationDiagnostics] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "curve": [p.to_dict() for p in self.curve],
            "anchorSummary": self.anchor_summary.to_dict(),
            "monthly": [m.to_dict() for m in self.monthly],
            "histogram": [b.to_dict() for b in self.histogram],
            "valuePath": [v.to_dict() for v in self.value_path],
            "diagnostics": self.diagnostics.to_dict() if self.diagnostics else None,
        }

    def to_frames(self) -> Dict[str, pd.DataFrame]:
        """One DataFrame per chart, columns named like the JSON keys."""
        d = self.to_dict()
        return {
            "curve": pd.DataFrame(d["curve"], columns=["populationSharePct", "cumulativeMagnitudeSharePct"]),
            "monthly": pd.DataFrame(d["monthly"], columns=["periodIndex", "cumulativeSharePct"]),
            "histogram": pd.DataFrame(d["histogram"], columns=["bucketLabel", "count"]),
            "value_path": pd.DataFrame(
                d["valuePath"],
                columns=["stepIndex", "populationSharePct", "cumulativeMagnitudeSharePct"],
            ),
        }
