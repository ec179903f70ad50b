# ui/sections/__init__.py

from .controls import render_controls
from .validation import render_validation
from .hero import render_hero
from .concentration import render_concentration
from .momentum import render_momentum
from .histogram import render_histogram

__all__ = [
    "render_controls",
    "render_validation",
    "render_hero",
    "render_concentration",
    "render_momentum",
    "render_histogram",
]
