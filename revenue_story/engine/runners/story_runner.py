from __future__ import annotations

from typing import Any, Mapping, Union

from revenue_story.curves.builder import build_raw_curve, gini_from_curve, to_curve_points
from revenue_story.curves.calibration import PARAMETRIC, Calibration, parametric_curve, piecewise_rescale
from revenue_story.curves.derived import build_histogram, build_monthly, build_value_path
from revenue_story.curves.models import AnchorSummary, CalibrationDiagnostics, GenerationResult
from revenue_story.curves.sampler import sample_magnitudes
from revenue_story.curves.sequence import LcgSequence
from revenue_story.engine.config.config import StoryConfig, build_config
from revenue_story.utils.logging_utils import done, stage


# ----------------------------
# Public API
# ----------------------------

def generate(config: Union[StoryConfig, Mapping[str, Any], None] = None, **overrides: Any) -> GenerationResult:
    """
    Build one calibrated concentration story.

    `config` may be a StoryConfig, a flat mapping or None (all defaults);
    keyword overrides are applied on top. Pure: the same inputs give a
    bit-identical GenerationResult, and nothing is kept between calls.

    Raises ConfigurationError before any work if the config is invalid.
    """
    cfg = resolve_config(config, **overrides)

    with stage(f"Calibrating concentration curve ({cfg.strategy}, n={cfg.count}, seed={cfg.seed})"):
        calibration = calibrate(cfg)

    with stage(f"Building derived series ({cfg.months} months, {cfg.histogram_bins} bins)"):
        monthly = build_monthly(cfg.months, cfg.monthly_model)
        histogram = build_histogram(cfg.histogram_bins, cfg.histogram_model)

    gini = gini_from_curve(calibration.population, calibration.share)
    diagnostics = CalibrationDiagnostics(
        strategy=calibration.strategy,
        calibrated_share_at_anchor_pct=calibration.share_at_anchor_pct,
        converged=calibration.converged,
        raw_share_at_anchor_pct=calibration.raw_share_at_anchor_pct,
        beta=calibration.beta,
        iterations=calibration.iterations,
        gini=gini,
    )

    result = GenerationResult(
        curve=to_curve_points(calibration.population, calibration.share),
        anchor_summary=AnchorSummary(
            population_share_pct=calibration.anchor_population_pct,
            magnitude_share_pct=calibration.share_at_anchor_pct,
        ),
        monthly=monthly,
        histogram=histogram,
        value_path=build_value_path(calibration.population, calibration.share, cfg.count),
        diagnostics=diagnostics,
    )

    done(
        f"{calibration.anchor_population_pct:g}% of customers -> "
        f"{calibration.share_at_anchor_pct:.1f}% of revenue (gini {gini:.3f})"
    )
    return result


def resolve_config(config: Union[StoryConfig, Mapping[str, Any], None] = None, **overrides: Any) -> StoryConfig:
    cfg = build_config(config)
    if overrides:
        cfg = cfg.with_overrides(**overrides)
    return cfg


def calibrate(cfg: StoryConfig) -> Calibration:
    """Run the configured calibration strategy and return the calibrated curve."""
    if cfg.strategy == PARAMETRIC:
        return parametric_curve(cfg.anchor, cfg.parametric)

    seq = LcgSequence(cfg.seed)
    magnitudes = sample_magnitudes(cfg.count, seq, cfg.sampler)
    population, share = build_raw_curve(magnitudes)
    return piecewise_rescale(population, share, cfg.anchor)


def raw_curve(config: Union[StoryConfig, Mapping[str, Any], None] = None, **overrides: Any):
    """Uncalibrated (population, share) arrays of the sampled population."""
    cfg = resolve_config(config, **overrides)
    magnitudes = sample_magnitudes(cfg.count, LcgSequence(cfg.seed), cfg.sampler)
    return build_raw_curve(magnitudes)
