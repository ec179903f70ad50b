# ui/validators.py
from typing import Any, Dict, List, Tuple

from revenue_story.curves.calibration import PARAMETRIC
from revenue_story.curves.derived import max_histogram_bins
from revenue_story.curves.errors import ConfigurationError
from revenue_story.engine.config.config import build_config

# below this the curve is too coarse to read the anchor off
MIN_READABLE_COUNT = 50


def validate(cfg: Dict[str, Any]) -> Tuple[List[str], List[str]]:
    """
    Returns (errors, warnings)
    UI-safe: never throws for bad values; reports errors instead.
    """
    errors: List[str] = []
    warnings: List[str] = []

    try:
        story = build_config(cfg)
    except ConfigurationError as e:
        errors.append(str(e))
        return errors, warnings

    # -----------------------------
    # Readability
    # -----------------------------
    if story.strategy != PARAMETRIC and story.count < MIN_READABLE_COUNT:
        warnings.append(
            f"Only {story.count} customers sampled; the curve will look stepped "
            f"(at least {MIN_READABLE_COUNT} recommended)."
        )

    # -----------------------------
    # Anchor shape
    # -----------------------------
    anchor = story.anchor_population_share_pct
    target = story.target_magnitude_share_pct
    if target >= anchor:
        if story.strategy == PARAMETRIC:
            warnings.append(
                f"{target:g}% of revenue at {anchor:g}% of customers is not a concentrated "
                "curve; the parametric fit cannot reach it and will use the closest shape."
            )
        else:
            warnings.append(
                f"Target {target:g}% is not below the anchor {anchor:g}%; "
                "the story will show less concentration than an even split."
            )

    # -----------------------------
    # Histogram head-room
    # -----------------------------
    limit = max_histogram_bins(story.histogram_model)
    if story.histogram_bins == limit:
        warnings.append(f"Histogram uses all {limit} bins available; the last bin holds a single customer.")

    return errors, warnings

