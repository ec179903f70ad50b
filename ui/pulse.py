# ui/pulse.py
from dataclasses import dataclass
from typing import Optional

PULSE_PERIOD_SECONDS = 2.6


@dataclass
class PulseState:
    """
    Cosmetic on/off highlight for the hero banner.

    Owned by the page session (st.session_state), advanced by a fragment that
    re-runs every `period_seconds` while `running`. Stopping it drops the
    schedule; nothing lives at module level.
    """

    period_seconds: float = PULSE_PERIOD_SECONDS
    on: bool = False
    ticks: int = 0
    running: bool = True

    low_opacity: float = 0.06
    high_opacity: float = 0.12

    def tick(self) -> bool:
        if self.running:
            self.on = not self.on
            self.ticks += 1
        return self.on

    def stop(self) -> None:
        self.running = False
        self.on = False

    def start(self) -> None:
        self.running = True

    @property
    def run_every(self) -> Optional[float]:
        """Fragment schedule; None means the fragment only re-runs with the page."""
        return self.period_seconds if self.running else None

    @property
    def opacity(self) -> float:
        return self.high_opacity if self.on else self.low_opacity


def get_pulse(session_state, key: str = "pulse") -> PulseState:
    if key not in session_state:
        session_state[key] = PulseState()
    return session_state[key]
