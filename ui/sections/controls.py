# ui/sections/controls.py
import streamlit as st

from revenue_story.curves.calibration import STRATEGIES


def _as_int(v, default: int) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _as_float(v, default: float) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return default


def render_controls(cfg: dict) -> None:
    """Sidebar inputs for the flat story settings. Edits cfg in place."""
    st.header("Story settings")

    strategy = cfg.get("strategy", "piecewise")
    cfg["strategy"] = st.radio(
        "Curve source",
        STRATEGIES,
        index=STRATEGIES.index(strategy) if strategy in STRATEGIES else 0,
        format_func=lambda s: {"piecewise": "Sampled customers", "parametric": "Closed-form curve"}[s],
        help="Sampled customers are rescaled to the anchor; the closed-form curve is fitted to it.",
    )

    col1, col2 = st.columns(2)
    with col1:
        cfg["anchor_population_share_pct"] = st.number_input(
            "Customers %",
            min_value=1.0,
            max_value=99.0,
            step=1.0,
            value=_as_float(cfg.get("anchor_population_share_pct"), 60.0),
        )
    with col2:
        cfg["target_magnitude_share_pct"] = st.number_input(
            "Revenue %",
            min_value=1.0,
            max_value=99.0,
            step=1.0,
            value=_as_float(cfg.get("target_magnitude_share_pct"), 40.0),
        )

    with st.expander("Sample & series (advanced)"):
        disabled = cfg["strategy"] != "piecewise"
        cfg["seed"] = st.number_input(
            "Seed",
            min_value=0,
            max_value=0xFFFFFFFF,
            value=_as_int(cfg.get("seed"), 9),
            disabled=disabled,
        )
        cfg["count"] = st.number_input(
            "Customers sampled",
            min_value=1,
            step=20,
            value=_as_int(cfg.get("count"), 520),
            disabled=disabled,
        )
        cfg["months"] = st.number_input(
            "Months",
            min_value=1,
            max_value=60,
            value=_as_int(cfg.get("months"), 12),
        )
        cfg["histogram_bins"] = st.number_input(
            "Histogram bins",
            min_value=1,
            max_value=30,
            value=_as_int(cfg.get("histogram_bins"), 12),
        )
