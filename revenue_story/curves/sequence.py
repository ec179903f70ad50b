from __future__ import annotations

from typing import Tuple

# Numerical Recipes LCG constants (full period over 2**32)
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
UINT32_MASK = 0xFFFFFFFF
UINT32_RANGE = float(0x100000000)


def lcg_next(state: int) -> Tuple[float, int]:
    """Advance a uint32 state once; returns (uniform in [0, 1), new state)."""
    s = (int(state) * LCG_MULTIPLIER + LCG_INCREMENT) & UINT32_MASK
    return s / UINT32_RANGE, s


class LcgSequence:
    """
    Single owned counter for one generation call.

    Two sequences built from the same seed yield the same stream; nothing is
    shared between instances and no ambient entropy is read.
    """

    def __init__(self, seed: int):
        self.state = int(seed) & UINT32_MASK
        self.draws = 0

    def next(self) -> float:
        value, self.state = lcg_next(self.state)
        self.draws += 1
        return value

    __call__ = next
