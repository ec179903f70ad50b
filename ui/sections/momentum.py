# ui/sections/momentum.py
import streamlit as st


def render_momentum(frames) -> None:
    st.subheader("How value piles up")

    col1, col2 = st.columns(2)
    with col1:
        st.caption("Month by month (compounding, slowing growth)")
        st.line_chart(
            frames["monthly"],
            x="periodIndex",
            y="cumulativeSharePct",
            x_label="Month",
            y_label="% of yearly value",
        )

    with col2:
        st.caption("By customer coverage")
        path = frames["value_path"]
        if path.empty:
            st.info("Too few customers to sample a value path.")
        else:
            st.line_chart(
                path,
                x="populationSharePct",
                y="cumulativeMagnitudeSharePct",
                x_label="% of customers covered",
                y_label="% of revenue",
            )
