# ui/sections/hero.py
import streamlit as st

from revenue_story.utils.output_utils import format_pct
from ui.pulse import PulseState


def render_hero(result, pulse: PulseState) -> None:
    summary = result.anchor_summary

    st.caption("Customer revenue concentration")
    st.title(
        f"{format_pct(summary.population_share_pct)} of our customers bring in "
        f"only {format_pct(summary.magnitude_share_pct)} of revenue"
    )

    @st.fragment(run_every=pulse.run_every)
    def _pulse_banner():
        pulse.tick()
        st.markdown(
            f"""
            <div style="border-radius:16px;padding:14px 18px;
                        background:rgba(99,102,241,{pulse.opacity});
                        transition:background 1.2s ease-in-out;">
              The remaining {format_pct(summary.remainder_share_pct)} comes from the other
              {format_pct(100 - summary.population_share_pct)} of customers.
            </div>
            """,
            unsafe_allow_html=True,
        )

    _pulse_banner()

    animate = st.toggle("Animate highlight", value=pulse.running)
    if animate and not pulse.running:
        pulse.start()
        st.rerun()
    elif not animate and pulse.running:
        pulse.stop()
        st.rerun()
