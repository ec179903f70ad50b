class ConfigurationError(ValueError):
    """Invalid generation config value. Raised before any sampling happens."""


class DegenerateDistributionError(RuntimeError):
    """Sampled magnitudes cannot form a concentration curve (zero/non-finite total,
    or a calibration denominator collapsed to the epsilon floor)."""


class CalibrationConvergenceWarning(RuntimeWarning):
    """Bisection ran out of iterations; the closest curve found is returned."""
