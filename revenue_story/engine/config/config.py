from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional

from revenue_story.curves.calibration import PIECEWISE, STRATEGIES, ParametricParams
from revenue_story.curves.derived import HistogramModel, MonthlyModel, max_histogram_bins
from revenue_story.curves.errors import ConfigurationError
from revenue_story.curves.models import AnchorConstraint
from revenue_story.curves.sampler import SamplerParams

UINT32_MAX = 0xFFFFFFFF

# camelCase names from the chart layer's contract -> config keys
KEY_ALIASES: Dict[str, str] = {
    "anchorPopulationSharePct": "anchor_population_share_pct",
    "targetMagnitudeSharePct": "target_magnitude_share_pct",
    "histogramBins": "histogram_bins",
    "monthlyModel": "monthly_model",
    "histogramModel": "histogram_model",
}

# nested tuning groups -> record type
_NESTED: Dict[str, type] = {
    "sampler": SamplerParams,
    "monthly_model": MonthlyModel,
    "histogram_model": HistogramModel,
    "parametric": ParametricParams,
}


# ------------------------------------------------------------
# Config record
# ------------------------------------------------------------

@dataclass(frozen=True)
class StoryConfig:
    seed: int = 9
    count: int = 520
    anchor_population_share_pct: float = 60.0
    target_magnitude_share_pct: float = 40.0
    months: int = 12
    histogram_bins: int = 12
    strategy: str = PIECEWISE

    sampler: SamplerParams = field(default_factory=SamplerParams)
    monthly_model: MonthlyModel = field(default_factory=MonthlyModel)
    histogram_model: HistogramModel = field(default_factory=HistogramModel)
    parametric: ParametricParams = field(default_factory=ParametricParams)

    @property
    def anchor(self) -> AnchorConstraint:
        return AnchorConstraint(self.anchor_population_share_pct, self.target_magnitude_share_pct)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def with_overrides(self, **overrides: Any) -> "StoryConfig":
        """New validated config; None values are ignored (unset CLI flags)."""
        merged = self.to_dict()
        for k, v in overrides.items():
            if v is None:
                continue
            k = KEY_ALIASES.get(k, k)
            if k in _NESTED and isinstance(v, Mapping) and isinstance(merged.get(k), dict):
                merged[k] = {**merged[k], **v}
            else:
                merged[k] = v
        return build_config(merged)


# ------------------------------------------------------------
# Coercion helpers (strict: bools are not numbers here)
# ------------------------------------------------------------

def _as_int(key: str, v: Any) -> int:
    if isinstance(v, bool):
        raise ConfigurationError(f"'{key}' must be an integer, got a boolean")
    if isinstance(v, float):
        if not v.is_integer():
            raise ConfigurationError(f"'{key}' must be an integer, got {v!r}")
        return int(v)
    try:
        return int(v)
    except (TypeError, ValueError):
        raise ConfigurationError(f"'{key}' must be an integer, got {v!r}") from None


def _as_float(key: str, v: Any) -> float:
    if isinstance(v, bool):
        raise ConfigurationError(f"'{key}' must be a number, got a boolean")
    try:
        out = float(v)
    except (TypeError, ValueError):
        raise ConfigurationError(f"'{key}' must be a number, got {v!r}") from None
    if not math.isfinite(out):
        raise ConfigurationError(f"'{key}' must be finite, got {v!r}")
    return out


def _coerce(key: str, v: Any, like: Any) -> Any:
    if isinstance(like, bool):
        return bool(v)
    if isinstance(like, int):
        return _as_int(key, v)
    if isinstance(like, float):
        return _as_float(key, v)
    return v


def _build_nested(name: str, raw: Any):
    cls = _NESTED[name]
    if isinstance(raw, cls):
        return raw
    if raw is None:
        return cls()
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"'{name}' must be a mapping, got {type(raw).__name__}")

    defaults = cls()
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigurationError(f"Unknown key(s) in '{name}': {', '.join(unknown)}")

    values = {k: _coerce(f"{name}.{k}", v, getattr(defaults, k)) for k, v in raw.items()}
    return replace(defaults, **values)


# ------------------------------------------------------------
# Public API
# ------------------------------------------------------------

def build_config(raw: Optional[Mapping[str, Any]] = None) -> StoryConfig:
    """
    Build a StoryConfig from a flat mapping (plus optional nested tuning groups).

    Missing keys fall back to StoryConfig defaults; unknown keys and invalid
    values raise ConfigurationError. Nothing is clamped.
    """
    if raw is None:
        raw = {}
    if isinstance(raw, StoryConfig):
        return validate_config(raw)
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"Config must be a mapping, got {type(raw).__name__}")

    normalized: Dict[str, Any] = {}
    for k, v in raw.items():
        key = KEY_ALIASES.get(k, k)
        if key in normalized:
            raise ConfigurationError(f"Config key '{key}' given twice (alias '{k}')")
        normalized[key] = v

    defaults = StoryConfig()
    known = {f.name for f in fields(StoryConfig)}
    unknown = sorted(set(normalized) - known)
    if unknown:
        raise ConfigurationError(f"Unknown config key(s): {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for k, v in normalized.items():
        if k in _NESTED:
            values[k] = _build_nested(k, v)
        elif k == "strategy":
            values[k] = str(v).strip().lower()
        else:
            values[k] = _coerce(k, v, getattr(defaults, k))

    return validate_config(replace(defaults, **values))


def validate_config(cfg: StoryConfig) -> StoryConfig:
    """Fail fast on values the engine cannot honour. Returns cfg unchanged."""
    if not 0 <= cfg.seed <= UINT32_MAX:
        raise ConfigurationError(f"'seed' must fit in an unsigned 32-bit integer, got {cfg.seed}")

    for key in ("count", "months", "histogram_bins"):
        if getattr(cfg, key) <= 0:
            raise ConfigurationError(f"'{key}' must be a positive integer, got {getattr(cfg, key)}")

    for key in ("anchor_population_share_pct", "target_magnitude_share_pct"):
        v = getattr(cfg, key)
        if not 0.0 < v < 100.0:
            raise ConfigurationError(f"'{key}' must be strictly between 0 and 100, got {v}")

    if cfg.strategy not in STRATEGIES:
        raise ConfigurationError(f"'strategy' must be one of {', '.join(STRATEGIES)}, got {cfg.strategy!r}")

    _validate_sampler(cfg.sampler)
    _validate_monthly(cfg.monthly_model)
    _validate_histogram(cfg.histogram_model, cfg.histogram_bins)
    _validate_parametric(cfg.parametric)
    return cfg


def _validate_sampler(s: SamplerParams) -> None:
    if s.log_sigma < 0:
        raise ConfigurationError("'sampler.log_sigma' must be >= 0")
    if not 0.0 <= s.jump_probability <= 1.0:
        raise ConfigurationError("'sampler.jump_probability' must be within [0, 1]")
    if s.floor <= 0:
        raise ConfigurationError("'sampler.floor' must be > 0")


def _validate_monthly(m: MonthlyModel) -> None:
    if m.start_value <= 0:
        raise ConfigurationError("'monthly_model.start_value' must be > 0")
    if m.growth_rate <= -1.0:
        raise ConfigurationError("'monthly_model.growth_rate' must be > -1")
    if m.rate_decay < 0:
        raise ConfigurationError("'monthly_model.rate_decay' must be >= 0")


def _validate_histogram(h: HistogramModel, bins: int) -> None:
    if h.start_count < 1:
        raise ConfigurationError("'histogram_model.start_count' must be >= 1")
    if h.start_magnitude <= 0:
        raise ConfigurationError("'histogram_model.start_magnitude' must be > 0")
    if not 0.0 < h.count_decay < 1.0:
        raise ConfigurationError("'histogram_model.count_decay' must be strictly between 0 and 1")
    if h.magnitude_growth <= 1.0:
        raise ConfigurationError("'histogram_model.magnitude_growth' must be > 1")

    limit = max_histogram_bins(h)
    if bins > limit:
        raise ConfigurationError(
            f"'histogram_bins'={bins} exceeds the {limit} strictly decreasing bin(s) "
            f"available from start_count={h.start_count} with count_decay={h.count_decay}"
        )


def _validate_parametric(p: ParametricParams) -> None:
    if not 0.0 < p.beta_min < p.beta_max:
        raise ConfigurationError("'parametric' needs 0 < beta_min < beta_max")
    if p.max_iterations <= 0:
        raise ConfigurationError("'parametric.max_iterations' must be > 0")
    if p.tolerance_pct <= 0:
        raise ConfigurationError("'parametric.tolerance_pct' must be > 0")
    if p.sample_points <= 0:
        raise ConfigurationError("'parametric.sample_points' must be > 0")
