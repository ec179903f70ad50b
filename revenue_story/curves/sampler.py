"""
Skewed magnitude sampler: many small customers, a few large ones.

Each magnitude is a lognormal base (Box-Muller on the shared LCG stream)
with an occasional multiplicative jump for outsized accounts:

    z    = sqrt(-2 ln u) * cos(2 pi v)
    base = exp(log_mean + log_sigma * z)
    jump = exp(jump_scale * r)   with probability jump_probability, else 1
    mag  = max(floor, base * jump)

Draw order per entity is u, v, the jump test, then the jump size only when
the test fires. Changing that order changes every curve downstream.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from revenue_story.curves.sequence import LcgSequence

# keeps log(u) finite when the LCG lands on exactly 0
_MIN_UNIFORM = 1e-9


@dataclass(frozen=True)
class SamplerParams:
    log_mean: float = 0.3
    log_sigma: float = 1.05
    jump_probability: float = 0.08
    jump_scale: float = 1.4
    floor: float = 0.08


def sample_magnitudes(count: int, seq: LcgSequence, params: SamplerParams = SamplerParams()) -> np.ndarray:
    """Return `count` strictly positive magnitudes, in draw order."""
    n = int(count)
    out = np.empty(n, dtype=np.float64)

    for i in range(n):
        u = max(_MIN_UNIFORM, seq.next())
        v = max(_MIN_UNIFORM, seq.next())
        z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)

        base = math.exp(params.log_mean + params.log_sigma * z)

        jump = 1.0
        if seq.next() < params.jump_probability:
            jump = math.exp(params.jump_scale * seq.next())

        out[i] = max(params.floor, base * jump)

    return out
