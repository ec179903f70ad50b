# ui/sections/concentration.py
import pandas as pd
import streamlit as st

from revenue_story.utils.output_utils import format_pct


def _with_equality_line(curve: pd.DataFrame) -> pd.DataFrame:
    df = pd.concat(
        [pd.DataFrame({"populationSharePct": [0.0], "cumulativeMagnitudeSharePct": [0.0]}), curve],
        ignore_index=True,
    )
    df["Equal split"] = df["populationSharePct"]
    return df.rename(columns={"cumulativeMagnitudeSharePct": "Revenue share"})


def render_concentration(result, frames) -> None:
    summary = result.anchor_summary
    st.subheader("How revenue concentrates")

    left, right = st.columns([3, 2])
    with left:
        st.line_chart(
            _with_equality_line(frames["curve"]),
            x="populationSharePct",
            y=["Revenue share", "Equal split"],
            x_label="% of customers (smallest to largest)",
            y_label="% of total revenue (cumulative)",
        )
        st.caption(
            f"Read Y at X = {format_pct(summary.population_share_pct)}. A low Y means most "
            "customers contribute little and the value sits at the top."
        )

    with right:
        st.metric(
            f"Bottom {format_pct(summary.population_share_pct)} of customers",
            format_pct(summary.magnitude_share_pct),
        )
        st.metric(
            f"Top {format_pct(100 - summary.population_share_pct)} of customers",
            format_pct(summary.remainder_share_pct),
        )
        diag = result.diagnostics
        if diag is not None:
            st.metric("Gini coefficient", f"{diag.gini:.2f}")
            if not diag.converged:
                st.warning("The closed-form curve could not reach the target exactly; showing the closest shape.")
