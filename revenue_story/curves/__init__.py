from .errors import (
    CalibrationConvergenceWarning,
    ConfigurationError,
    DegenerateDistributionError,
)
from .models import (
    AnchorConstraint,
    AnchorSummary,
    CalibrationDiagnostics,
    CurvePoint,
    GenerationResult,
    HistogramBin,
    MonthlyPoint,
    ValuePathPoint,
)

__all__ = [
    "CalibrationConvergenceWarning",
    "ConfigurationError",
    "DegenerateDistributionError",
    "AnchorConstraint",
    "AnchorSummary",
    "CalibrationDiagnostics",
    "CurvePoint",
    "GenerationResult",
    "HistogramBin",
    "MonthlyPoint",
    "ValuePathPoint",
]
