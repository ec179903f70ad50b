"""Deterministic revenue concentration curves for the concentration story page."""

from revenue_story.curves.errors import (
    CalibrationConvergenceWarning,
    ConfigurationError,
    DegenerateDistributionError,
)
from revenue_story.curves.models import GenerationResult
from revenue_story.engine.config.config import StoryConfig, build_config
from revenue_story.engine.runners.story_runner import generate

__version__ = "0.1.0"

__all__ = [
    "generate",
    "build_config",
    "StoryConfig",
    "GenerationResult",
    "ConfigurationError",
    "DegenerateDistributionError",
    "CalibrationConvergenceWarning",
]
